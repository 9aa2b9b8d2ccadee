import copy

import pytest

from drillbook.banker import BankerState, RequestError

MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
NEED = [[7, 4, 3], [1, 2, 2], [6, 0, 0], [0, 1, 1], [4, 3, 1]]
AVAILABLE = [3, 3, 2]


def _state():
    return BankerState(AVAILABLE, MAXIMUM, NEED)


def _totals(state):
    return [
        free + sum(row[kind] for row in state.allocation)
        for kind, free in enumerate(state.available)
    ]


def test_allocation_is_maximum_minus_need():
    state = _state()
    for max_row, need_row, alloc_row in zip(state.maximum, state.need, state.allocation):
        assert [n + a for n, a in zip(need_row, alloc_row)] == max_row


def test_textbook_safe_sequence():
    assert _state().safe_sequence() == [1, 3, 4, 0, 2]


def test_safe_sequence_is_permutation():
    sequence = _state().safe_sequence()
    assert sorted(sequence) == list(range(len(NEED)))


def test_unsafe_state_has_no_sequence():
    assert BankerState([0], [[1]], [[1]]).safe_sequence() is None


def test_granted_request_conserves_resources():
    state = _state()
    before = _totals(state)
    sequence = state.request(1, [1, 0, 2])
    assert sorted(sequence) == list(range(len(NEED)))
    assert _totals(state) == before
    assert state.need[1] == [n - r for n, r in zip(NEED[1], [1, 0, 2])]


def test_request_above_need_is_refused():
    state = _state()
    with pytest.raises(RequestError):
        state.request(3, [1, 0, 0])


def test_request_above_available_is_refused():
    state = _state()
    with pytest.raises(RequestError):
        state.request(4, [4, 0, 0])


def test_unsafe_request_is_rolled_back():
    state = _state()
    state.request(1, [1, 0, 2])
    snapshot = (
        copy.deepcopy(state.available),
        copy.deepcopy(state.allocation),
        copy.deepcopy(state.need),
    )
    with pytest.raises(RequestError):
        state.request(0, [0, 2, 0])
    assert (state.available, state.allocation, state.need) == snapshot


def test_unknown_process_raises():
    with pytest.raises(IndexError):
        _state().request(len(NEED), [0, 0, 0])


def test_wrong_amount_count_raises():
    with pytest.raises(ValueError):
        _state().request(0, [0, 0])


def test_need_above_maximum_is_rejected():
    with pytest.raises(ValueError):
        BankerState([1], [[1]], [[2]])


def test_ragged_rows_are_rejected():
    with pytest.raises(ValueError):
        BankerState([1, 1], [[1]], [[1]])