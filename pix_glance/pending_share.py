from __future__ import annotations

import threading


class PendingShare:
    """At most one shared path waiting for the runtime to pick it up.

    A new value overwrites any unconsumed one (no queue). ``take`` returns the
    value and clears it in one step.
    """

    def __init__(self) -> None:
        self._value: str | None = None
        self._lock = threading.Lock()

    def put(self, value: str | None) -> None:
        with self._lock:
            self._value = value

    def take(self) -> str | None:
        with self._lock:
            value, self._value = self._value, None
            return value

    def peek(self) -> str | None:
        with self._lock:
            return self._value

    @property
    def has_pending(self) -> bool:
        return self.peek() is not None
