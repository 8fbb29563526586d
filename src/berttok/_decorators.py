"""Reusable decorators for tokenizer utilities."""

import time
import functools
import logging
from typing import Callable

log = logging.getLogger(__name__)


def measure_time(label: str) -> Callable[[Callable], Callable]:
    """
    Log how long the wrapped callable takes as ``"<label> in N s"``.

    :param label: What finished, e.g. ``"vocabulary loaded"``.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            # logged on failure too, so slow unreadable files still show up
            finally:
                elapsed = time.perf_counter() - start
                log.info(f"{label} in {elapsed:.3f} s")

        return wrapper

    return decorator
