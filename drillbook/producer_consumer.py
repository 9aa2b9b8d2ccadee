"""Producers and consumers sharing a bounded ring buffer."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

MAX_NUM = 10


@dataclass(frozen=True)
class ThreadInfo:
    """One worker: its id, role (P or C), start delay and time spent in the buffer."""

    tid: int
    role: str
    delay: float
    persist: float


class BoundedBuffer:
    """A ring buffer guarded by empty/full semaphores and a mutex.

    With a ``timeout`` a produce or consume that waits longer raises
    TimeoutError; without one it waits indefinitely.
    """

    def __init__(self, size: int = MAX_NUM, timeout: Optional[float] = None) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self.timeout = timeout
        self.slots = [0] * size
        self.current = 0
        self._in = 0
        self._out = 0
        self._empty = threading.Semaphore(size)
        self._full = threading.Semaphore(0)
        self._mutex = threading.Lock()

    def __len__(self) -> int:
        return self.current

    def _wait(self, semaphore: threading.Semaphore) -> None:
        if not semaphore.acquire(timeout=self.timeout):
            raise TimeoutError("waited too long for the buffer")

    @contextmanager
    def _producing(self) -> Iterator[int]:
        self._wait(self._empty)
        with self._mutex:
            value = self.current
            self.slots[self._in] = value
            self.current += 1
            self._in = (self._in + 1) % self.size
            try:
                yield value
            finally:
                self._full.release()

    @contextmanager
    def _consuming(self) -> Iterator[int]:
        self._wait(self._full)
        with self._mutex:
            value = self.slots[self._out]
            self.slots[self._out] = -1
            self._out = (self._out + 1) % self.size
            self.current -= 1
            try:
                yield value
            finally:
                self._empty.release()

    def produce(self) -> int:
        """Store the next product and return it."""
        with self._producing() as value:
            return value

    def consume(self) -> int:
        """Take the oldest product and return it."""
        with self._consuming() as value:
            return value


def parse_thread_specs(text: str) -> list[ThreadInfo]:
    """Parse whitespace-separated records of id, role, delay and persist."""
    tokens = text.split()
    if len(tokens) % 4:
        raise ValueError("each thread needs an id, a role, a delay and a duration")
    groups = [tokens[i:i + 4] for i in range(0, len(tokens), 4)]
    return [ThreadInfo(int(tid), role, float(delay), float(persist)) for tid, role, delay, persist in groups]


def run(
    specs: Iterable[ThreadInfo],
    buffer: BoundedBuffer,
    sleep: Callable[[float], object] = time.sleep,
) -> list[str]:
    """Start a thread per producer or consumer, wait for all, and return the log."""
    log: list[str] = []
    log_lock = threading.Lock()

    def say(line: str) -> None:
        with log_lock:
            log.append(line)
            print(line, flush=True)

    def producer(info: ThreadInfo) -> None:
        sleep(info.delay)
        say(f"Producer {info.tid} sents the producing require !")
        try:
            with buffer._producing():
                say(f"Producer {info.tid} begins to produce product !")
                sleep(info.persist)
                say(f"Producer {info.tid} finished producing !")
                say("缓冲区+1")
        except TimeoutError:
            say(f"Producer {info.tid} gave up waiting !")
            return
        say(f"Producer {info.tid} releases the power !")

    def consumer(info: ThreadInfo) -> None:
        sleep(info.delay)
        say(f"Comsumer {info.tid} sents the consuming require !")
        try:
            with buffer._consuming():
                say(f"Consumer {info.tid} begins to consume product !")
                sleep(info.persist)
                say(f"Consumer {info.tid} finished consuming !")
                say("缓冲区-1")
        except TimeoutError:
            say(f"Comsumer {info.tid} gave up waiting !")
            return
        say(f"Comsumer {info.tid} releases the power")

    workers = {"P": producer, "C": consumer}
    threads = [
        threading.Thread(target=workers[info.role], args=(info,))
        for info in specs
        if info.role in workers
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return log


def main(argv: Optional[list] = None) -> int:
    """Run the producers and consumers listed in a spec file."""
    parser = argparse.ArgumentParser(prog="producer_consumer", description=main.__doc__)
    parser.add_argument("path", nargs="?", default="test2.txt", help="file of thread records")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("error in open file !")
        return 1
    try:
        specs = parse_thread_specs(text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print("Producer and Consumer:")
    run(specs, BoundedBuffer())
    print("All producer and consumer have finished operating !")
    return 0


if __name__ == "__main__":
    sys.exit(main())