"""A mental arithmetic game: spot two digits hidden among letters and combine them."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional, TextIO

OPERATORS = "+-*/"
ROUNDS = 10
_LETTERS = "abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class Question:
    """Two digits joined by an operator, padded with letters as noise.

    ``noise`` holds the letters before the left digit, between the left
    digit and the operator, between the operator and the right digit, and
    after the right digit.
    """

    left: int
    op: str
    right: int
    noise: tuple[str, str, str, str] = ("", "", "", "")

    def __post_init__(self) -> None:
        if self.op not in OPERATORS:
            raise ValueError(f"operator must be one of {OPERATORS!r}")
        if self.op == "/" and (self.left == 0 or self.right == 0):
            raise ValueError("division needs non-zero digits")

    @property
    def text(self) -> str:
        before, after_left, before_right, after = self.noise
        return f"{before}{self.left}{after_left}{self.op}{before_right}{self.right}{after}"

    def accepts(self, answer: int) -> bool:
        """True when ``answer`` is the result; for - and / either order counts."""
        a, b = self.left, self.right
        if self.op == "+":
            return answer == a + b
        if self.op == "*":
            return answer == a * b
        if self.op == "-":
            return answer in (a - b, b - a)
        return answer in (a // b, b // a)


def make_question(rng: random.Random) -> Question:
    """A random question with digits 1-9 and up to four letters of noise per side."""

    def letters(count: int) -> str:
        return "".join(rng.choice(_LETTERS) for _ in range(count))

    count = rng.randrange(4) + 1
    before = letters(count)
    left = rng.randrange(9) + 1
    after_left = letters(count - 1)
    op = rng.choice(OPERATORS)
    before_right = letters(count - 1)
    right = rng.randrange(9) + 1
    after = letters(count)
    return Question(left, op, right, (before, after_left, before_right, after))


def rating(correct: int) -> str:
    """The closing remark for ``correct`` right answers."""
    if correct < 0:
        raise ValueError("correct must not be negative")
    if correct < 3:
        return f"才答对了{correct}题，好弱！！"
    if correct < 8:
        return f"答对了{correct}题,还行"
    return f"666,恭喜你答对了{correct}题,厉害了！！"


def _header() -> None:
    print("\n\n+++++++++++++你会看见的数字和运算符+++++++++++++")
    print("+++++++++++++++++计算出它们结果+++++++++++++++++\n")


def _clear() -> None:
    print("\033[2J\033[H", end="", flush=True)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Optional[list] = None) -> int:
    """Play ten rounds, reading answers from standard input."""
    parser = argparse.ArgumentParser(prog="mathgame", description=main.__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for the questions")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds each question shows")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    stream = _tokens(sys.stdin)

    now = datetime.now()
    print(now.strftime("%Y/%m/%d"))
    print(now.strftime("%H:%M"))
    _header()
    print("\n游戏将在3s后开始了，准备好了吗")
    for remaining in range(3, 0, -1):
        print(remaining, flush=True)
        time.sleep(args.delay)
    _clear()
    _header()

    correct = 0
    try:
        for _ in range(ROUNDS):
            question = make_question(rng)
            print(question.text, flush=True)
            time.sleep(args.delay)
            _clear()
            _header()
            print("请输入你所计算的结果:")
            token = next(stream)
            _clear()
            _header()
            try:
                answer = int(token)
            except ValueError:
                continue
            if question.accepts(answer):
                correct += 1
    except StopIteration:
        pass
    print(rating(correct))
    return 0


if __name__ == "__main__":
    sys.exit(main())