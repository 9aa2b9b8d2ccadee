"""Five-in-a-row noughts and crosses on a 5x5 board against a random computer."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterator, Optional, TextIO

SIZE = 5
EMPTY = " "
PLAYER = "x"
COMPUTER = "o"
DRAW = "draw"
_MARKS = (PLAYER, COMPUTER)

_MENU = "\n".join(
    [
        "*********************",
        "1、开始游戏",
        "2、退出游戏",
        "*********************",
    ]
)


class Board:
    """A square board; a full row, column or diagonal of one mark wins."""

    def __init__(self, size: int = SIZE) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._cells = [[EMPTY] * size for _ in range(size)]

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        return self._cells[row][col]

    def _lines(self) -> Iterator[list[str]]:
        yield from self._cells
        for col in range(self.size):
            yield [row[col] for row in self._cells]
        yield [self._cells[i][i] for i in range(self.size)]
        yield [self._cells[i][self.size - 1 - i] for i in range(self.size)]

    def place(self, row: int, col: int, mark: str) -> None:
        """Put ``mark`` on an empty cell."""
        if mark not in _MARKS:
            raise ValueError(f"mark must be one of {_MARKS}, got {mark!r}")
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        if self._cells[row][col] != EMPTY:
            raise ValueError(f"cell ({row}, {col}) is already taken")
        self._cells[row][col] = mark

    def is_full(self) -> bool:
        return all(cell != EMPTY for row in self._cells for cell in row)

    def winner(self) -> Optional[str]:
        """The winning mark, DRAW when the board is full, otherwise None."""
        for line in self._lines():
            if line[0] != EMPTY and all(cell == line[0] for cell in line):
                return line[0]
        return DRAW if self.is_full() else None

    def empty_cells(self) -> list[tuple[int, int]]:
        return [
            (row, col)
            for row, cells in enumerate(self._cells)
            for col, cell in enumerate(cells)
            if cell == EMPTY
        ]

    def format(self) -> str:
        rule = "*" * (7 * self.size + 1)
        blank = "|" + "      |" * self.size
        lines = []
        for cells in self._cells:
            lines.append(rule)
            lines.append(blank)
            lines.append("|" + "".join(f"   {cell}  |" for cell in cells))
            lines.append(blank)
        lines.append(rule)
        return "\n".join(lines)


def computer_move(board: Board, rng: random.Random) -> tuple[int, int]:
    """Place the computer's mark on a random empty cell and return it."""
    cells = board.empty_cells()
    if not cells:
        raise ValueError("the board is full")
    row, col = rng.choice(cells)
    board.place(row, col, COMPUTER)
    return row, col


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _player_move(board: Board, stream: Iterator[str]) -> None:
    while True:
        print("请输入您想要落子的下标（x y）：", end="")
        try:
            row, col = int(next(stream)), int(next(stream))
            board.place(row, col, PLAYER)
        except IndexError:
            print("输入不合法，请重新输入：", end="")
            continue
        except ValueError:
            print("该位置已经有子，请重新输入:", end="")
            continue
        print(board.format())
        return


def main(argv: Optional[list] = None) -> int:
    """Play games against the computer on standard input."""
    parser = argparse.ArgumentParser(prog="tictactoe", description=main.__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer's moves")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    stream = _tokens(sys.stdin)
    try:
        while True:
            print(_MENU)
            try:
                choice = int(next(stream))
            except ValueError:
                continue
            if choice == 2:
                print("Game Over!")
                break
            board = Board()
            print(board.format())
            while True:
                _player_move(board, stream)
                result = board.winner()
                if result == DRAW:
                    print("平局")
                    break
                if result == PLAYER:
                    print("游戏结束、玩家胜利！")
                    break
                print("电脑落子")
                computer_move(board, rng)
                print(board.format())
                if board.winner() == COMPUTER:
                    print("游戏结束、电脑胜利！")
                    break
    except StopIteration:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())