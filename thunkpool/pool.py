"""A fixed-size pool of threads that runs zero-argument callables in FIFO order."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable, Deque

from .semaphore import Semaphore

_log = logging.getLogger(__name__)

Thunk = Callable[[], object]


class ThreadPool:
    """Runs scheduled thunks on a constant number of worker threads.

    Thunks are started in the order they were scheduled. ``wait`` blocks
    until every thunk scheduled so far has finished. ``close`` (also called
    on leaving a ``with`` block) waits for outstanding work and then stops
    the workers; scheduling afterwards raises ``RuntimeError``.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 0:
            raise ValueError("num_threads must not be negative")
        self._tasks: Deque[Thunk] = deque()
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._pending = Semaphore(0)
        self._active = 0
        self._closed = False
        self._workers = [
            threading.Thread(
                target=self._work, name=f"thunkpool-worker-{index}", daemon=True
            )
            for index in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def schedule(self, thunk: Thunk) -> None:
        """Queue ``thunk`` to be run by one of the pool's threads."""
        if thunk is None or not callable(thunk):
            raise TypeError("cannot schedule a non-callable task")
        with self._lock:
            if self._closed:
                raise RuntimeError("cannot schedule a task on a closed ThreadPool")
            self._tasks.append(thunk)
        self._pending.signal()

    def wait(self) -> None:
        """Block until the queue is empty and no thunk is running."""
        with self._idle:
            self._idle.wait_for(lambda: not self._tasks and self._active == 0)

    def close(self) -> None:
        """Wait for all scheduled thunks, then stop and join the workers."""
        with self._lock:
            if self._closed:
                return
        self.wait()
        with self._lock:
            if self._closed:
                return
            self._closed = True
        for _ in self._workers:
            self._pending.signal()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __copy__(self):
        raise TypeError("a ThreadPool cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("a ThreadPool cannot be copied")

    def _work(self) -> None:
        while True:
            self._pending.wait()
            with self._lock:
                if not self._tasks:
                    return
                thunk = self._tasks.popleft()
                self._active += 1
            try:
                thunk()
            except Exception:
                _log.exception("scheduled task raised an exception")
            finally:
                with self._idle:
                    self._active -= 1
                    if self._active == 0 and not self._tasks:
                        self._idle.notify_all()