"""Sum a list of integers by splitting it into chunks summed on a thread pool."""

from __future__ import annotations

import sys
from typing import Sequence

from .pool import ThreadPool

DEFAULT_DATA: tuple[int, ...] = (100, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15)
DEFAULT_THREADS = 3


def compute_sum(data: Sequence[int], start: int, end: int) -> int:
    """Return the sum of ``data[start:end]``."""
    return sum(data[start:end])


def sum_in_chunks(data: Sequence[int], num_threads: int) -> list[int]:
    """Return one partial sum per thread, each over a contiguous chunk of ``data``.

    The chunk size is rounded up so that every element is covered; threads
    whose chunk would start past the end of the data contribute zero.
    """
    if num_threads <= 0:
        raise ValueError("num_threads must be positive")
    results = [0] * num_threads
    size = len(data)
    chunk = (size + num_threads - 1) // num_threads

    def make_task(index: int, start: int, end: int):
        def task() -> None:
            results[index] = compute_sum(data, start, end)

        return task

    with ThreadPool(num_threads) as pool:
        for index in range(num_threads):
            start = index * chunk
            end = min(start + chunk, size)
            if start < size:
                pool.schedule(make_task(index, start, end))
        pool.wait()
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Sum the built-in sample data on three threads and print the total."""
    total = sum(sum_in_chunks(DEFAULT_DATA, DEFAULT_THREADS))
    print(f"Total sum of elements: {total}")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())