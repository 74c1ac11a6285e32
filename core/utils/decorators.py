"""
Timing utilities.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator


@contextmanager
def timer() -> Iterator[Dict[str, int]]:
    """
    Measure wall time of a block in milliseconds.

    The yielded dict is filled on exit, so read ``t["ms"]`` after the block:

        >>> with timer() as t:
        ...     do_work()
        >>> elapsed = t["ms"]
    """
    result = {"ms": 0}
    start = time.perf_counter()
    try:
        yield result
    finally:
        result["ms"] = max(1, int((time.perf_counter() - start) * 1000))
