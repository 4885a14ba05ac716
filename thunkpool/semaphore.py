"""A counting semaphore built on a condition variable."""

from __future__ import annotations

import threading


class Semaphore:
    """Counting semaphore: ``wait`` takes one unit, ``signal`` gives one back.

    The count starts at ``count``. ``wait`` blocks while the count is not
    positive.
    """

    def __init__(self, count: int = 0) -> None:
        self._count = count
        self._condition = threading.Condition(threading.Lock())

    def signal(self) -> None:
        """Add one unit, waking waiters when the count becomes available."""
        with self._condition:
            self._count += 1
            if self._count == 1:
                self._condition.notify_all()

    def wait(self) -> None:
        """Block until the count is positive, then take one unit."""
        with self._condition:
            self._condition.wait_for(lambda: self._count > 0)
            self._count -= 1