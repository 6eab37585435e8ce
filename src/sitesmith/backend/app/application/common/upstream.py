from __future__ import annotations

from typing import Awaitable, Callable, TypeVar

import anyio

T = TypeVar("T")


async def bounded(call: Callable[[], Awaitable[T]], *, timeout_s: float) -> T:
    """
    Run a collaborator call under a deadline.
    A timeout surfaces as TimeoutError, so callers treat it like any other failure.
    """
    with anyio.fail_after(timeout_s):
        return await call()
