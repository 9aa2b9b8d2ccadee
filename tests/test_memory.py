import pytest

from drillbook.memory import (
    MEMORY_SIZE,
    Block,
    FreeListAllocator,
    OutOfMemory,
    PartitionTable,
)


def _total(blocks):
    return sum(block.size for block in blocks)


def _contiguous(blocks):
    return all(a.end == b.start for a, b in zip(blocks, blocks[1:]))


def test_fresh_table_is_one_free_block():
    table = PartitionTable()
    assert table.blocks == [Block(0, MEMORY_SIZE)]
    assert table.used == 0


def test_first_fit_splits_lowest_block():
    table = PartitionTable()
    index = table.first_fit(100)
    assert index == 0
    assert table.blocks[0] == Block(0, 100, True)
    assert table.blocks[1].start == 100
    assert not table.blocks[1].used
    assert _total(table.blocks) == table.capacity
    assert _contiguous(table.blocks)


def test_small_remainder_hands_out_whole_block():
    table = PartitionTable()
    table.first_fit(table.capacity - 2)
    assert table.blocks == [Block(0, table.capacity, True)]


def test_request_too_large_raises():
    table = PartitionTable()
    with pytest.raises(OutOfMemory):
        table.first_fit(table.capacity + 1)
    with pytest.raises(OutOfMemory):
        table.best_fit(table.capacity + 1)
    with pytest.raises(OutOfMemory):
        table.worst_fit(table.capacity + 1)


def test_non_positive_request_raises():
    with pytest.raises(ValueError):
        PartitionTable().first_fit(0)


def _fragmented():
    table = PartitionTable()
    for size in (100, 50, 100, 200):
        table.first_fit(size)
    small_start = table.blocks[1].start
    large_start = table.blocks[3].start
    table.release(1)
    table.release(3)
    return table, small_start, large_start


def test_best_fit_picks_smallest_hole():
    table, small_start, _ = _fragmented()
    index = table.best_fit(40)
    assert table.blocks[index].start == small_start
    assert table.blocks[index].size == 40
    assert _total(table.blocks) == table.capacity


def test_worst_fit_picks_largest_hole():
    table, _, large_start = _fragmented()
    index = table.worst_fit(40)
    assert table.blocks[index].start == large_start
    assert _contiguous(table.blocks)


def test_release_merges_back_to_one_block():
    table = PartitionTable()
    for size in (100, 50, 100):
        table.first_fit(size)
    table.release(1)
    table.release(0)
    table.release(1)
    assert table.blocks == [Block(0, table.capacity)]


def test_release_of_free_block_raises():
    table = PartitionTable()
    with pytest.raises(ValueError):
        table.release(0)
    with pytest.raises(ValueError):
        table.release(7)


def test_format_reports_usage():
    table = PartitionTable()
    table.first_fit(100)
    text = table.format()
    assert "已占用大小:100" in text
    assert "占用" in text and "空闲" in text


def test_allocator_round_trip():
    allocator = FreeListAllocator()
    job = allocator.allocate(100)
    assert job == 0
    assert allocator.jobs[0].start == 0
    assert allocator.free[0].start == 100
    released = allocator.release(job)
    assert released.size == 100
    assert allocator.free == [Block(0, allocator.capacity)]
    assert allocator.jobs == []


def test_allocator_releases_middle_then_merges():
    allocator = FreeListAllocator()
    for _ in range(3):
        allocator.allocate(100)
    allocator.release(1)
    assert [hole.start for hole in allocator.free] == sorted(hole.start for hole in allocator.free)
    assert len(allocator.free) == 2
    allocator.release(1)
    assert len(allocator.free) == 1
    assert allocator.free[0].start == 100
    allocator.release(0)
    assert allocator.free == [Block(0, allocator.capacity)]


def test_allocator_exact_fit_removes_hole():
    allocator = FreeListAllocator()
    allocator.allocate(allocator.capacity)
    assert allocator.free == []
    with pytest.raises(OutOfMemory):
        allocator.allocate(1)


def test_allocator_unknown_job_raises():
    with pytest.raises(IndexError):
        FreeListAllocator().release(0)