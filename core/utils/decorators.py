"""
Utility decorators and context managers.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator


@contextmanager
def timer() -> Iterator[Dict[str, float]]:
    """
    Measure the wall-clock duration of a block.

    The yielded dict is filled in when the block exits (also on error):
    ``seconds`` holds the float duration.

    Example:
        >>> with timer() as t:
        ...     do_work()
        >>> t["seconds"]
    """
    elapsed: Dict[str, float] = {"seconds": 0.0}
    start = time.perf_counter()
    try:
        yield elapsed
    finally:
        elapsed["seconds"] = time.perf_counter() - start
