import pytest

from drillbook.arraylist import ArrayList


def test_push_back_and_front():
    values = ArrayList()
    values.push_back(2)
    values.push_back(3)
    values.push_front(1)
    assert list(values) == [1, 2, 3]


def test_pop_front_and_back():
    values = ArrayList([1, 2, 3])
    assert values.pop_front() == 1
    assert values.pop_back() == 3
    assert list(values) == [2]


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(ArrayList(), method)()


def test_find_is_one_based():
    values = ArrayList([10, 20, 30, 20])
    assert values.find(10) == 1
    assert values.find(20) == 2
    assert values.find(99) is None


def test_insert_at_zero_based_positions():
    values = ArrayList([1, 3])
    values.insert(1, 2)
    values.insert(0, 0)
    values.insert(4, 4)
    assert list(values) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("position", [-1, 3])
def test_insert_out_of_range(position):
    values = ArrayList([1, 2])
    with pytest.raises(IndexError):
        values.insert(position, 9)
    assert list(values) == [1, 2]


def test_erase():
    values = ArrayList([1, 2, 3])
    assert values.erase(1) == 2
    assert list(values) == [1, 3]


def test_erase_out_of_range():
    with pytest.raises(IndexError):
        ArrayList([1]).erase(1)


def test_format():
    assert ArrayList([1, 2, 3]).format() == "1 2 3 "
    assert ArrayList().format() == ""


def test_push_then_pop_round_trip():
    values = ArrayList()
    for value in range(5):
        values.push_back(value)
    popped = [values.pop_back() for _ in range(5)]
    assert popped == [4, 3, 2, 1, 0]
    assert len(values) == 0