"""The banker's algorithm for deadlock avoidance."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO


class RequestError(Exception):
    """Raised when a resource request cannot be granted."""


class BankerState:
    """Available resources with each process's maximum, allocation and need."""

    def __init__(
        self,
        available: Sequence[int],
        maximum: Iterable[Sequence[int]],
        need: Iterable[Sequence[int]],
    ) -> None:
        self.available = list(available)
        self.maximum = [list(row) for row in maximum]
        self.need = [list(row) for row in need]
        kinds = len(self.available)
        if len(self.maximum) != len(self.need):
            raise ValueError("maximum and need must list the same processes")
        if any(len(row) != kinds for row in self.maximum + self.need):
            raise ValueError(f"every row must have {kinds} resource kinds")
        self.allocation = [
            [most - wanted for most, wanted in zip(max_row, need_row)]
            for max_row, need_row in zip(self.maximum, self.need)
        ]
        if any(amount < 0 for row in self.allocation for amount in row):
            raise ValueError("need exceeds maximum")

    def safe_sequence(self) -> Optional[list[int]]:
        """An order in which every process can finish, or None if the state is unsafe."""
        work = list(self.available)
        finished = [False] * len(self.need)
        sequence: list[int] = []
        for _ in range(len(self.need)):
            for process, (need_row, alloc_row) in enumerate(zip(self.need, self.allocation)):
                if finished[process]:
                    continue
                if all(wanted <= free for wanted, free in zip(need_row, work)):
                    work = [free + held for free, held in zip(work, alloc_row)]
                    finished[process] = True
                    sequence.append(process)
        return sequence if all(finished) else None

    def _apply(self, process: int, amounts: Sequence[int], sign: int) -> None:
        for kind, amount in enumerate(amounts):
            self.available[kind] -= sign * amount
            self.allocation[process][kind] += sign * amount
            self.need[process][kind] -= sign * amount

    def request(self, process: int, amounts: Sequence[int]) -> list[int]:
        """Grant ``amounts`` to ``process`` if the result is safe; return the safe sequence."""
        if not 0 <= process < len(self.need):
            raise IndexError(f"no process P{process}")
        amounts = list(amounts)
        if len(amounts) != len(self.available):
            raise ValueError(f"expected {len(self.available)} amounts")
        if any(amount < 0 for amount in amounts):
            raise ValueError("amounts must not be negative")
        if any(amount > wanted for amount, wanted in zip(amounts, self.need[process])):
            raise RequestError("不允许申请量大于需求量!")
        if any(amount > free for amount, free in zip(amounts, self.available)):
            raise RequestError("不允许申请量大于可利用资源量!")
        self._apply(process, amounts, 1)
        sequence = self.safe_sequence()
        if sequence is None:
            self._apply(process, amounts, -1)
            raise RequestError("当前状态不安全！")
        return sequence


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _report(sequence: Optional[list[int]]) -> None:
    if sequence is None:
        print("当前状态不安全！")
        return
    print("当前状态安全！")
    print("安全序列为：" + "".join(f"P{process} " for process in sequence))


def _read_matrix(stream: Iterator[str], rows: int, cols: int, title: str) -> list[list[int]]:
    print(title)
    matrix = []
    for process in range(rows):
        print(f"P{process}:")
        matrix.append([int(next(stream)) for _ in range(cols)])
    return matrix


def main(argv: Optional[list] = None) -> int:
    """Read a banker state from standard input and serve resource requests."""
    stream = _tokens(sys.stdin)
    try:
        print("请输入进程数：", end="")
        processes = int(next(stream))
        print("请输入资源种类数：", end="")
        kinds = int(next(stream))
        maximum = _read_matrix(stream, processes, kinds, "输入各进程对各类资源的最大需求量：")
        need = _read_matrix(stream, processes, kinds, "输入各进程对各类资源的需求量：")
        print("输入系统可用资源数：")
        available = [int(next(stream)) for _ in range(kinds)]
        state = BankerState(available, maximum, need)
        _report(state.safe_sequence())
        while True:
            print("输入进程名及其资源请求量：")
            process = int(next(stream))
            amounts = [int(next(stream)) for _ in range(kinds)]
            try:
                sequence = state.request(process, amounts)
            except RequestError as exc:
                print(exc)
                print("请重新输入。")
                continue
            except (IndexError, ValueError) as exc:
                print(exc)
                continue
            print("请求并试分配成功。")
            _report(sequence)
            print("分配成功。")
            print("是否继续请求资源分配？输入Y继续，输入y结束：")
            if next(stream) != "Y":
                break
    except StopIteration:
        pass
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())