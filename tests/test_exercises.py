import os

import pytest

from drillbook.exercises import bounce, diamond, hello_lines, main, process_ids


def test_diamond_top_widens_by_two():
    lines = diamond(7)
    top = lines[:7]
    assert top[0] == "*"
    assert all(set(line) == {"*"} for line in top)
    assert all(len(b) - len(a) == 2 for a, b in zip(top, top[1:]))


def test_diamond_bottom_narrows_to_nothing():
    lines = diamond(7)
    bottom = lines[7:]
    assert len(lines) == 14
    assert bottom[-1] == ""
    assert bottom[-2] == "*"
    assert len(bottom[0]) == len(lines[6]) - 2
    assert all(len(a) - len(b) == 2 for a, b in zip(bottom, bottom[1:-1]))


def test_diamond_negative_rows_raise():
    with pytest.raises(ValueError):
        diamond(-1)


def test_bounce_ten_times_from_hundred():
    assert bounce(100.0, 10) == (299.609375, 0.09765625)


def test_bounce_once_is_the_drop():
    assert bounce(80.0, 1) == (80.0, 40.0)


def test_bounce_rebound_halves():
    _, first = bounce(64.0, 3)
    _, second = bounce(64.0, 4)
    assert second == first / 2


def test_bounce_needs_a_landing():
    with pytest.raises(ValueError):
        bounce(100.0, 0)


def test_hello_lines():
    lines = hello_lines(10)
    assert len(lines) == 10
    assert lines[0] == "hello linux!  0"
    assert lines[-1] == "hello linux!  9"


def test_process_ids():
    assert process_ids() == (os.getpid(), os.getppid())


def test_main_prints_diamond(capsys):
    assert main(["diamond", "--rows", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == diamond(3)