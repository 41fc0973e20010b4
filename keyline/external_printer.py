"""A thread-safe queue of messages to print while a line is being edited."""

from __future__ import annotations

import queue
from typing import Generic, Iterator, Optional, TypeVar

EXTERNAL_PRINTER_DEFAULT_CAPACITY = 20

T = TypeVar("T")


class ExternalPrinter(Generic[T]):
    """Collects lines from other threads.

    Each line is printed above the prompt, and editing continues below it.
    Sending blocks once ``max_cap`` lines are waiting to be printed.
    """

    def __init__(self, max_cap: int = EXTERNAL_PRINTER_DEFAULT_CAPACITY) -> None:
        if isinstance(max_cap, bool) or not isinstance(max_cap, int) or max_cap < 1:
            raise ValueError("the printer capacity must be a positive integer")
        self._capacity = max_cap
        self._queue: "queue.Queue[T]" = queue.Queue(maxsize=max_cap)

    @property
    def capacity(self) -> int:
        """How many lines may wait before sending blocks."""
        return self._capacity

    def __len__(self) -> int:
        return self._queue.qsize()

    def print(self, line: T) -> None:
        """Queue a line, blocking while the printer is full."""
        self._queue.put(line)

    def get_line(self) -> Optional[T]:
        """Take the oldest waiting line without blocking, or None if there is none."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def lines(self) -> Iterator[T]:
        """Yield every line waiting right now, oldest first."""
        while True:
            line = self.get_line()
            if line is None:
                return
            yield line