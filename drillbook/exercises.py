"""Small console exercises: a star diamond, a bouncing ball, greetings, process ids."""

from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Optional


def diamond(rows: int = 7) -> list[str]:
    """Lines of stars widening by two for ``rows`` lines, then narrowing again."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    top = ["*" * (2 * i + 1) for i in range(rows)]
    bottom = ["*" * max(2 * i - 1, 0) for i in range(rows - 1, -1, -1)]
    return top + bottom


def bounce(height: float = 100.0, bounces: int = 10) -> tuple[float, float]:
    """Distance travelled by a ball dropped from ``height`` when it lands the
    ``bounces``-th time, and the height of that last rebound; each rebound
    reaches half the previous height."""
    if bounces < 1:
        raise ValueError("bounces must be at least 1")
    travelled = height
    rebound = height / 2
    for _ in range(2, bounces + 1):
        travelled += 2 * rebound
        rebound /= 2
    return travelled, rebound


def hello_lines(count: int = 10) -> list[str]:
    """Numbered greeting lines."""
    return [f"hello linux!  {number}" for number in range(count)]


def process_ids() -> tuple[int, int]:
    """This process's id and its parent's."""
    return os.getpid(), os.getppid()


def main(argv: Optional[list] = None) -> int:
    """Run one of the exercises; the diamond when none is named."""
    parser = argparse.ArgumentParser(prog="exercises", description=main.__doc__)
    commands = parser.add_subparsers(dest="command")
    shape = commands.add_parser("diamond", help="print a diamond of stars")
    shape.add_argument("--rows", type=int, default=7)
    ball = commands.add_parser("bounce", help="print the bouncing-ball totals")
    ball.add_argument("--height", type=float, default=100.0)
    ball.add_argument("--bounces", type=int, default=10)
    greet = commands.add_parser("hello", help="read a number, then print greetings")
    greet.add_argument("--count", type=int, default=10)
    pids = commands.add_parser("pids", help="print the process and parent ids")
    pids.add_argument("--stay", action="store_true", help="keep running afterwards")
    args = parser.parse_args(argv)

    command = args.command or "diamond"
    if command == "diamond":
        for line in diamond(getattr(args, "rows", 7)):
            print(line)
    elif command == "bounce":
        travelled, rebound = bounce(args.height, args.bounces)
        print(f"the total of road is {travelled:f}")
        print(f"the tenth is {rebound:f} meter")
    elif command == "hello":
        sys.stdin.readline()
        for line in hello_lines(args.count):
            print(line)
    else:
        pid, parent = process_ids()
        print(f"{pid} ")
        print(f"{parent} ", flush=True)
        while args.stay:
            time.sleep(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())