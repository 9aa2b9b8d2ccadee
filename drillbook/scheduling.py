"""Process scheduling: FCFS, SJF and non-preemptive/preemptive HRRN."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, TextIO


@dataclass
class Task:
    """A process with arrival and service times and the times it ran."""

    name: str
    come_time: int
    turn_time: int
    start_time: int = -1
    end_time: int = -1
    wait_time: int = 0


def _prepare(tasks: Iterable[Task]) -> list[Task]:
    copies = [replace(task, start_time=-1, end_time=-1, wait_time=0) for task in tasks]
    for task in copies:
        if task.turn_time <= 0:
            raise ValueError(f"task {task.name!r} needs a positive service time")
    return copies


def _run_in_order(ordered: list[Task]) -> list[Task]:
    clock = 0
    for task in ordered:
        task.start_time = clock
        clock += task.turn_time
        task.end_time = clock
    return ordered


def fcfs(tasks: Iterable[Task]) -> list[Task]:
    """First come first served; tasks returned in the order they ran."""
    return _run_in_order(sorted(_prepare(tasks), key=lambda task: task.come_time))


def sjf(tasks: Iterable[Task]) -> list[Task]:
    """Shortest job first; tasks returned in the order they ran."""
    return _run_in_order(sorted(_prepare(tasks), key=lambda task: task.turn_time))


def _priority(task: Task) -> tuple:
    # Unfinished tasks first, highest response ratio first; then finished by end time.
    if task.end_time < 0:
        ratio = (task.wait_time + task.turn_time) / task.turn_time
        return (0, -ratio)
    return (1, task.end_time)


def _hrrn(tasks: Iterable[Task]) -> tuple[list[Task], list[tuple[str, int]]]:
    pending = _prepare(tasks)
    runs: list[tuple[str, int]] = []
    clock = 0
    while pending:
        for task in pending:
            task.wait_time = clock - task.come_time
        pending.sort(key=_priority)
        head = pending[0]
        if head.end_time >= 0:
            break
        runs.append((head.name, head.turn_time))
        head.start_time = clock
        clock += head.turn_time
        head.end_time = clock
    return sorted(pending, key=lambda task: task.come_time), runs


def hrrn(tasks: Iterable[Task]) -> list[Task]:
    """Non-preemptive highest response ratio next; result sorted by arrival."""
    return _hrrn(tasks)[0]


def _preemptive(tasks: Iterable[Task]) -> tuple[list[Task], list[tuple[str, int]]]:
    work = _prepare(tasks)
    service = {id(task): task.turn_time for task in work}
    slices: list[tuple[str, int]] = []
    clock = 0
    while work:
        for task in work:
            task.wait_time = clock - task.come_time
        work.sort(key=_priority)
        head = work[0]
        if head.end_time >= 0:
            break
        if head.start_time < 0:
            head.start_time = clock
        slices.append((head.name, 1))
        clock += 1
        head.turn_time -= 1
        if head.turn_time <= 0:
            head.end_time = clock
    for task in work:
        task.turn_time = service[id(task)]
    return sorted(work, key=lambda task: task.end_time), slices


def preemptive_hrrn(tasks: Iterable[Task]) -> list[Task]:
    """Highest response ratio next re-evaluated every time unit; sorted by end time."""
    return _preemptive(tasks)[0]


def format_table(tasks: Iterable[Task]) -> str:
    lines = ["进程运行信息：", "task_name  come_time   start_time   turn_time   end_time"]
    for task in tasks:
        lines.append(
            f"     {task.name:<9}{task.come_time:<13}"
            f"{task.start_time:<10}{task.turn_time:<12}{task.end_time:<4}"
        )
    return "\n".join(lines)


_MENU = (
    "             命令",
    "\n\n       **** 0.输入进程数据信息",
    "       **** 1.FCFS算法",
    "       **** 2.SJF算法",
    "       **** 3.HRRN算法",
    "       **** 4.RR算法",
    "       **** 5.End Up Code!!!\n",
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _show_runs(runs: list[tuple[str, int]]) -> None:
    for name, units in runs:
        print(f"{name}进程正在执行", end="", flush=True)
        for _ in range(10):
            time.sleep(0.1 * units)
            print(".", end="", flush=True)
        print()


def _read_tasks(stream: Iterator[str]) -> list[Task]:
    print("请输入进程的个数:  ", end="")
    count = int(next(stream))
    print("请输入每个进程的名称，到达时间，服务时间")
    tasks = []
    for number in range(1, count + 1):
        print(f"第{number}个进程信息输入：")
        name = next(stream)
        come = int(next(stream))
        turn = int(next(stream))
        tasks.append(Task(name, come, turn))
    print("进程信息输入完毕！！！")
    return tasks


def main(argv: Optional[list] = None) -> int:
    """Run the interactive scheduling menu on standard input."""
    stream = _tokens(sys.stdin)
    tasks: list[Task] = []
    print("             《进程调度实验程序》\n")
    try:
        while True:
            for line in _MENU:
                print(line)
            print("请输入命令: ", end="")
            try:
                command = int(next(stream))
            except ValueError:
                command = -1
            try:
                if command == 0:
                    tasks = _read_tasks(stream)
                elif command == 1:
                    print("     <启动 FCFS 调度算法>")
                    result = fcfs(tasks)
                    runs = [(task.name, task.turn_time) for task in result]
                elif command == 2:
                    print("     <启动 SJF 调度算法>")
                    result = sjf(tasks)
                    runs = [(task.name, task.turn_time) for task in result]
                elif command == 3:
                    print("     <启动非抢占式 HRRN 调度算法>")
                    result, runs = _hrrn(tasks)
                elif command == 4:
                    print("     <启动  RR 调度算法>")
                    result, runs = _preemptive(tasks)
                if command in (1, 2, 3, 4):
                    _show_runs(runs)
                    print("\n所有进程全部执行完毕！！！\n")
                    print(format_table(result))
            except ValueError as exc:
                print(exc)
            print("进程信息还原成功！！！")
            if command == 5:
                break
    except StopIteration:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())