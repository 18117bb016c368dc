from __future__ import annotations

import threading


class OutputCell:
    """
    A single string shared between one writer (the command's current run)
    and any number of readers (the aggregator).

    Every access holds the lock only for one copy or assignment, so a reader
    never waits longer than a single write's critical section.
    """

    __slots__ = ("_lock", "_value")

    def __init__(self, value: str = "") -> None:
        self._lock = threading.Lock()
        self._value = value

    def read(self) -> str:
        with self._lock:
            return self._value

    def write(self, value: str) -> None:
        """Replace the previous contents."""
        with self._lock:
            self._value = value

    def __repr__(self) -> str:
        return f"OutputCell({self.read()!r})"
