import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args: Any) -> T:
    """
    Runs a blocking call in a worker thread.

    A cancelled caller stays suspended until the thread returns and only
    then sees the cancellation, so a semaphore slot held by the caller
    covers the whole run of the thread.

    Returns:
        The call's return value.
    """
    task = asyncio.ensure_future(asyncio.to_thread(func, *args))
    try:
        return await asyncio.shield(task)
    except asyncio.CancelledError:
        await asyncio.wait({task})
        if not task.cancelled():
            # the result is abandoned; mark the exception as retrieved
            task.exception()
        raise
