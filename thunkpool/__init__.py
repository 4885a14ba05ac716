"""A fixed-size thread pool that runs zero-argument callables in FIFO order."""

__version__ = "0.1.0"
__all__ = ["chunksum", "drills", "pool", "semaphore"]