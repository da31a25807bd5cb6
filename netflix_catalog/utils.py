"""
Miscelaneous utilities.
"""

import inspect
import time
from functools import wraps
from typing import Callable

from netflix_catalog.logger import logger


def _log_elapsed(func, init: float) -> None:
    end = time.perf_counter() - init
    logger.info(f"{func.__name__} finished in {1000 * end:.2f} ms")


def timed(func) -> Callable:
    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def timed_coro(*args, **kwargs):
            init = time.perf_counter()
            out = await func(*args, **kwargs)
            _log_elapsed(func, init)
            return out
        return timed_coro

    @wraps(func)
    def timed_func(*args, **kwargs):
        init = time.perf_counter()
        out = func(*args, **kwargs)
        _log_elapsed(func, init)
        return out
    return timed_func
