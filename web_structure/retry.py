# File: web_structure/retry.py
"""Retry with exponential backoff and jitter for async operations."""
from __future__ import annotations

import asyncio
import random
from typing import Awaitable, Callable, Optional, TypeVar

__all__ = ("retry", "backoff_delay")

T = TypeVar("T")

RetryHook = Callable[[int, BaseException, float], None]


def backoff_delay(attempt: int, base_delay: float, rand: Callable[[], float] = random.random) -> float:
    """Delay before attempt ``attempt + 1``: ``base * 2**attempt`` scaled into [50%, 100%]."""
    return base_delay * (2 ** attempt) * (0.5 + rand() * 0.5)


async def retry(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 1.0,
    *,
    on_retry: Optional[RetryHook] = None,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> T:
    """Await ``operation()`` until it succeeds or ``max_attempts`` are used up.

    The last error is re-raised on exhaustion. ``on_retry(attempt, exc, delay)``
    is called before each backoff sleep; logging is left to the caller.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    attempt = 0
    while True:
        try:
            return await operation()
        except Exception as exc:
            if attempt >= max_attempts - 1:
                raise
            delay = backoff_delay(attempt, base_delay)
            if on_retry is not None:
                on_retry(attempt, exc, delay)
        await sleep(delay)
        attempt += 1
