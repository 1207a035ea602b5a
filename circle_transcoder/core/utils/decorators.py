"""
Timing helpers.
"""

import time
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass
class Timer:
    """Elapsed time holder filled in by the timer() context manager"""

    start: float = 0.0
    end: float = 0.0

    @property
    def elapsed_ms(self) -> int:
        return int((self.end - self.start) * 1000)


@contextmanager
def timer():
    """
    Measure wall-clock time of the enclosed block.

    Example:
        >>> with timer() as t:
        ...     do_work()
        >>> t.elapsed_ms
    """
    t = Timer(start=time.perf_counter())
    try:
        yield t
    finally:
        t.end = time.perf_counter()
