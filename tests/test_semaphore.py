import copy
import functools
import threading
import time

import pytest

from thunkpool.semaphore import Semaphore


def _start(target):
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


def _take(sem, finished, lock):
    sem.wait()
    with lock:
        finished.append(1)


def _consume(sem, count, done, lock):
    for _ in range(count):
        sem.wait()
        with lock:
            done.append(1)


def _signal_times(sem, count):
    for _ in range(count):
        sem.signal()


def test_initial_count_allows_that_many_waits():
    sem = Semaphore(2)
    first = _start(sem.wait)
    first.join(1.0)
    second = _start(sem.wait)
    second.join(1.0)
    assert not first.is_alive()
    assert not second.is_alive()


def test_wait_blocks_at_zero_until_signal():
    sem = Semaphore()
    waiter = _start(sem.wait)
    waiter.join(0.2)
    assert waiter.is_alive()
    sem.signal()
    waiter.join(1.0)
    assert not waiter.is_alive()


def test_third_wait_blocks_after_count_used_up():
    sem = Semaphore(2)
    sem.wait()
    sem.wait()
    waiter = _start(sem.wait)
    waiter.join(0.2)
    assert waiter.is_alive()
    sem.signal()
    waiter.join(1.0)
    assert not waiter.is_alive()


def test_signal_then_wait_does_not_block():
    sem = Semaphore(0)
    sem.signal()
    waiter = _start(sem.wait)
    waiter.join(1.0)
    assert not waiter.is_alive()


def test_each_signal_releases_exactly_one_waiter():
    sem = Semaphore(0)
    finished = []
    lock = threading.Lock()

    waiters = [_start(functools.partial(_take, sem, finished, lock)) for _ in range(5)]
    time.sleep(0.1)
    sem.signal()
    sem.signal()
    time.sleep(0.2)
    with lock:
        released = len(finished)
    assert released == 2
    for _ in range(3):
        sem.signal()
    for waiter in waiters:
        waiter.join(1.0)
    assert len(finished) == len(waiters)
    assert not any(waiter.is_alive() for waiter in waiters)

    # Every signal was consumed, so another wait must block.
    extra = _start(sem.wait)
    extra.join(0.2)
    assert extra.is_alive()
    sem.signal()
    extra.join(1.0)
    assert not extra.is_alive()


def test_many_concurrent_signals_match_waits():
    sem = Semaphore(0)
    count = 200
    done = []
    lock = threading.Lock()

    consumer_thread = _start(functools.partial(_consume, sem, count, done, lock))
    producers = [_start(functools.partial(_signal_times, sem, count // 4)) for _ in range(4)]
    for producer in producers:
        producer.join(2.0)
    consumer_thread.join(2.0)
    assert not consumer_thread.is_alive()
    assert len(done) == count

    # Signals and waits balanced out, so the count is back at zero.
    extra = _start(sem.wait)
    extra.join(0.2)
    assert extra.is_alive()
    sem.signal()
    extra.join(1.0)
    assert not extra.is_alive()


def test_negative_initial_count_needs_extra_signals():
    sem = Semaphore(-1)
    waiter = _start(sem.wait)
    sem.signal()
    waiter.join(0.2)
    assert waiter.is_alive()
    sem.signal()
    waiter.join(1.0)
    assert not waiter.is_alive()