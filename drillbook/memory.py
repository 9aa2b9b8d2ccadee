"""Contiguous memory allocation: a partition table and a free-list allocator."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

MEMORY_SIZE = 512
MIN_REMAINDER = 2


class OutOfMemory(Exception):
    """Raised when no free block is large enough for a request."""


@dataclass
class Block:
    """A contiguous region of memory; ``end`` is one past its last unit."""

    start: int
    size: int
    used: bool = False

    @property
    def end(self) -> int:
        return self.start + self.size


def _check_request(request: int) -> None:
    if request <= 0:
        raise ValueError(f"request must be positive, got {request}")


class PartitionTable:
    """Variable partitions with first, best and worst fit allocation.

    A free block whose leftover after a request would be at most
    ``min_remainder`` is handed out whole instead of being split.
    """

    def __init__(self, capacity: int = MEMORY_SIZE, min_remainder: int = MIN_REMAINDER) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.min_remainder = min_remainder
        self.blocks: list[Block] = [Block(0, capacity)]

    @property
    def used(self) -> int:
        return sum(block.size for block in self.blocks if block.used)

    def _candidates(self, request: int) -> list[tuple[int, Block]]:
        _check_request(request)
        candidates = [
            (index, block)
            for index, block in enumerate(self.blocks)
            if not block.used and block.size >= request
        ]
        if not candidates:
            raise OutOfMemory(f"no free block holds {request} units")
        return candidates

    def _allocate(self, index: int, request: int) -> int:
        block = self.blocks[index]
        if block.size - request > self.min_remainder:
            self.blocks.insert(index + 1, Block(block.start + request, block.size - request))
            block.size = request
        block.used = True
        return index

    def first_fit(self, request: int) -> int:
        """Allocate from the lowest free block that fits; return its index."""
        index, _ = self._candidates(request)[0]
        return self._allocate(index, request)

    def best_fit(self, request: int) -> int:
        """Allocate from the smallest free block that fits; return its index."""
        index, _ = min(self._candidates(request), key=lambda item: item[1].size)
        return self._allocate(index, request)

    def worst_fit(self, request: int) -> int:
        """Allocate from the largest free block; return its index."""
        index, _ = max(self._candidates(request), key=lambda item: item[1].size)
        return self._allocate(index, request)

    def release(self, index: int) -> Block:
        """Free the used block at ``index``, merging it with free neighbours."""
        if not 0 <= index < len(self.blocks) or not self.blocks[index].used:
            raise ValueError(f"block {index} is not in use")
        block = self.blocks[index]
        block.used = False
        if index + 1 < len(self.blocks) and not self.blocks[index + 1].used:
            block.size += self.blocks[index + 1].size
            del self.blocks[index + 1]
        if index > 0 and not self.blocks[index - 1].used:
            self.blocks[index - 1].size += block.size
            del self.blocks[index]
            index -= 1
        return self.blocks[index]

    def format(self) -> str:
        rule = "-" * 51
        lines = [
            rule,
            f"{'数字':>5}{'起始地址':>15}{'大小':>15}{'状态':>15}",
            rule,
        ]
        for index, block in enumerate(self.blocks):
            state = "占用" if block.used else "空闲"
            lines.append(f"{index:5d}{block.start:15d}{block.size:15d}{state:>15}")
        lines.append("")
        lines.append("-" * 46)
        used = self.used
        lines.append(
            f"内存信息:{self.capacity:<10d} 已占用大小:{used:<10d} 空闲大小:{self.capacity - used:<10d}"
        )
        return "\n".join(lines)


class FreeListAllocator:
    """First-fit allocator keeping a sorted free list and a list of jobs."""

    def __init__(self, capacity: int = MEMORY_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.free: list[Block] = [Block(0, capacity)]
        self.jobs: list[Block] = []

    def allocate(self, length: int) -> int:
        """Place a job of ``length`` units in the first hole that fits; return its id."""
        _check_request(length)
        for position, hole in enumerate(self.free):
            if hole.size >= length:
                break
        else:
            raise OutOfMemory(f"no free block holds {length} units")
        self.jobs.append(Block(hole.start, length, True))
        if hole.size == length:
            del self.free[position]
        else:
            hole.start += length
            hole.size -= length
        return len(self.jobs) - 1

    def release(self, job_id: int) -> Block:
        """Return job ``job_id`` to the free list; later job ids shift down by one."""
        if not 0 <= job_id < len(self.jobs):
            raise IndexError(f"no job with id {job_id}")
        job = self.jobs.pop(job_id)
        before = next((i for i, hole in enumerate(self.free) if hole.end == job.start), None)
        after = next((i for i, hole in enumerate(self.free) if hole.start == job.end), None)
        if before is not None and after is not None:
            self.free[before].size += job.size + self.free[after].size
            del self.free[after]
        elif before is not None:
            self.free[before].size += job.size
        elif after is not None:
            self.free[after].start = job.start
            self.free[after].size += job.size
        else:
            self.free.append(Block(job.start, job.size))
            self.free.sort(key=lambda hole: hole.start)
        return Block(job.start, job.size)


def _format_allocator(allocator: FreeListAllocator) -> str:
    lines = [
        f"空闲分区ID:{i} 起止:{hole.start} 结束:{hole.end} 长度:{hole.size}"
        for i, hole in enumerate(allocator.free)
    ]
    lines += [
        f"作业分区ID：{i} 起止:{job.start} 结束:{job.end} 长度:{job.size}"
        for i, job in enumerate(allocator.jobs)
    ]
    return "\n".join(lines)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


_MENU = (
    "=================================================",
    "         1.首次适应算法\t     2.最佳适应算法",
    "         3.最坏适应算法\t     4.删除已分配空间",
    "         5.显示内存信息\t     6. 退出程序",
    "=================================================",
)


def _run_table(stream: Iterator[str]) -> None:
    table = PartitionTable()
    fits = {
        1: ("首次适应算法:请输入需要请求的空间大小", table.first_fit),
        2: ("最好适应算法:请输入需要请求的空间大小", table.best_fit),
        3: ("最坏适应算法:请输入需要请求的空间大小", table.worst_fit),
    }
    while True:
        print("\n".join(_MENU))
        try:
            choice = int(next(stream))
        except ValueError:
            continue
        if choice == 6:
            return
        if choice in fits:
            prompt, fit = fits[choice]
            print(prompt)
            try:
                fit(int(next(stream)))
            except (OutOfMemory, ValueError):
                print("内存不足!!")
            print(table.format())
        elif choice == 4:
            print("\n请输入想释放的空间的数字:")
            try:
                table.release(int(next(stream)))
            except ValueError:
                print("输入的数字不对!")
            print(table.format())
        elif choice == 5:
            print(table.format())


def _run_free_list(stream: Iterator[str]) -> None:
    allocator = FreeListAllocator()
    print(_format_allocator(allocator))
    print("输入1装入新作业，输入0回收作业，输入-1结束")
    for token in stream:
        command = int(token)
        if command == 1:
            print("请输入作业的占用空间的长度 ", end="")
            try:
                allocator.allocate(int(next(stream)))
            except (OutOfMemory, ValueError):
                print("内存分配失败")
        elif command == 0:
            print("输入要回收的作业ID ", end="")
            try:
                allocator.release(int(next(stream)))
            except (IndexError, ValueError):
                print("作业ID不存在")
        else:
            print("操作结束")
            return
        print(_format_allocator(allocator))


def main(argv: Optional[list] = None) -> int:
    """Run the partition-table menu, or the free-list allocator with --free-list."""
    parser = argparse.ArgumentParser(prog="memory", description=main.__doc__)
    parser.add_argument("--free-list", action="store_true", help="use the free-list allocator")
    args = parser.parse_args(argv)
    stream = _tokens(sys.stdin)
    try:
        if args.free_list:
            _run_free_list(stream)
        else:
            _run_table(stream)
    except (StopIteration, ValueError):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())