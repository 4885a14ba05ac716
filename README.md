# thunkpool

A small thread pool with a fixed number of worker threads. It runs
*thunks* (callables that take no arguments) in the order they were
scheduled. Each worker takes the next queued thunk as soon as it is
idle.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the pool

```python
from thunkpool.pool import ThreadPool

results = [0, 0, 0]

with ThreadPool(2) as pool:
    for i in range(3):
        pool.schedule(lambda i=i: results.__setitem__(i, i + 1))
    pool.wait()

print(results)  # [1, 2, 3]
```

- `ThreadPool(num_threads)` starts `num_threads` worker threads. A
  negative count raises `ValueError`.
- `schedule(thunk)` puts a callable on the queue. Passing something that
  is not callable (including `None`) raises `TypeError`. Scheduling on a
  pool that has been closed raises `RuntimeError`.
- `wait()` blocks until the queue is empty and no thunk is running. It
  may be called any number of times, from any number of threads, and
  the pool can be reused after it returns. Thunks may schedule more
  thunks; `wait()` covers those too.
- `close()` waits for all scheduled work to finish, then stops and joins
  the workers. Calling it again does nothing. Leaving a `with` block
  calls `close()`.

A thunk's return value is ignored. If a thunk raises an exception, the
exception is logged through the `thunkpool.pool` logger and the worker
carries on with the next thunk.

Calling `wait()` from inside a thunk blocks forever, since the calling
thunk itself counts as running work. A pool with no workers never runs
anything, so `wait()` on it blocks once a thunk has been scheduled.

With a single worker, thunks run strictly one after another in the order
they were scheduled.

A pool cannot be copied: `copy.copy` and `copy.deepcopy` raise
`TypeError`.

## The semaphore

`thunkpool.semaphore.Semaphore` is the counting semaphore the pool is
built on:

```python
from thunkpool.semaphore import Semaphore

ready = Semaphore(0)
# in one thread:
ready.wait()     # blocks until the count is above zero, then takes one
# in another:
ready.signal()   # adds one to the count, waking waiters when it reaches one
```

## Command-line programs

`thunkpool-chunksum` splits a fixed list of fifteen integers into three
chunks, sums each chunk on the pool and prints the total:

```
$ thunkpool-chunksum
Total sum of elements: 219
```

The same work is available from Python through
`thunkpool.chunksum.compute_sum(data, start, end)`, which returns the sum
of `data[start:end]`, and
`thunkpool.chunksum.sum_in_chunks(data, num_threads)`, which returns one
partial sum per thread (zero for a thread whose chunk would start past
the end of the data). A `num_threads` below one raises `ValueError`.

`thunkpool-drills` runs small demonstration scenarios that print as the
pool works. It takes exactly one flag:

| Flag | What it does |
| --- | --- |
| `--s` | Ten thunks on four workers, each printing when it starts and finishes |
| `--single-thread-no-wait` | One thunk, then a one-second pause instead of `wait()` |
| `--single-thread-single-wait` | One slow thunk, left for closing the pool to wait on |
| `--no-threads-double-wait` | Calls `wait()` twice with nothing scheduled |
| `--reuse-thread-pool` | Sixteen thunks, `wait()`, then one more and `wait()` again |
| `--all` | Runs every scenario above in flag order, each headed by its flag |

```
$ thunkpool-drills --no-threads-double-wait
```

Without exactly one flag, or with a flag it does not know, it prints a
message saying so, runs nothing and exits with status 0.

The scenarios can also be run from Python through the functions in
`thunkpool.drills` (`simple_test`, `single_thread_no_wait_test`,
`single_thread_single_wait_test`, `no_threads_double_wait_test`,
`reuse_thread_pool_test`, `build_test_map` and `execute_all`); each takes
an optional text stream to print to, defaulting to standard output.