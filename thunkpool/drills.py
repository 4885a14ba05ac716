"""Exercise drills for the thread pool, selectable by command-line flag."""

from __future__ import annotations

import sys
import threading
import time
from typing import Callable, Mapping, Sequence, TextIO

from .pool import ThreadPool

Drill = Callable[[TextIO], None]

_output_lock = threading.Lock()


def _emit(out: TextIO, line: str) -> None:
    with _output_lock:
        print(line, file=out)
        out.flush()


def _sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000)


def _resolve(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def simple_test(
    num_threads: int = 4, num_functions: int = 10, out: TextIO | None = None
) -> None:
    """Run ``num_functions`` short sleeping thunks, reporting start and finish."""
    stream = _resolve(out)

    def make_task(ident: int):
        def task() -> None:
            _emit(stream, f"Thread (ID: {ident}) has started.")
            _sleep_ms((ident % 3) * 10)
            _emit(stream, f"Thread (ID: {ident}) has finished.")

        return task

    with ThreadPool(num_threads) as pool:
        for ident in range(num_functions):
            pool.schedule(make_task(ident))
        pool.wait()


def single_thread_no_wait_test(out: TextIO | None = None) -> None:
    """Schedule one thunk and sleep instead of calling ``wait``."""
    stream = _resolve(out)
    with ThreadPool(4) as pool:
        pool.schedule(lambda: _emit(stream, "This is a test."))
        _sleep_ms(1000)


def single_thread_single_wait_test(out: TextIO | None = None) -> None:
    """Schedule one slow thunk and rely on closing the pool to wait for it."""
    stream = _resolve(out)

    def task() -> None:
        _emit(stream, "This is a test.")
        _sleep_ms(1000)

    with ThreadPool(4) as pool:
        pool.schedule(task)


def no_threads_double_wait_test(out: TextIO | None = None) -> None:
    """Call ``wait`` twice on a pool with nothing scheduled."""
    with ThreadPool(4) as pool:
        pool.wait()
        pool.wait()


def reuse_thread_pool_test(out: TextIO | None = None) -> None:
    """Run a batch, wait, then run another thunk on the same pool."""
    stream = _resolve(out)

    def batch_task() -> None:
        _emit(stream, "This is a test.")
        _sleep_ms(50)

    def final_task() -> None:
        _emit(stream, "This is a code.")
        _sleep_ms(1000)

    with ThreadPool(4) as pool:
        for _ in range(16):
            pool.schedule(batch_task)
        pool.wait()
        pool.schedule(final_task)
        pool.wait()


def build_test_map() -> dict[str, Drill]:
    """Return the drills keyed by their command-line flag, in flag order."""
    entries: dict[str, Drill] = {
        "--single-thread-no-wait": single_thread_no_wait_test,
        "--single-thread-single-wait": single_thread_single_wait_test,
        "--no-threads-double-wait": no_threads_double_wait_test,
        "--reuse-thread-pool": reuse_thread_pool_test,
        "--s": lambda out: simple_test(out=out),
    }
    return dict(sorted(entries.items()))


def execute_all(tests: Mapping[str, Drill], out: TextIO | None = None) -> None:
    """Run every drill in flag order, each preceded by its flag."""
    stream = _resolve(out)
    for flag in sorted(tests):
        _emit(stream, f"{flag}:")
        tests[flag](stream)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the drill named by the single flag argument, or all with ``--all``."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if len(args) != 1:
        _emit(out, "Ouch! I need exactly two arguments.")
        return 0
    tests = build_test_map()
    flag = args[0]
    if flag == "--all":
        execute_all(tests, out)
        return 0
    drill = tests.get(flag)
    if drill is None:
        _emit(out, f'Oops... we don\'t recognize the flag "{flag}".')
        return 0
    drill(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())