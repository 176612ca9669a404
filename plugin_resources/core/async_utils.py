"""Async utilities for plugin resource loading."""

import asyncio
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any, TypeVar


T = TypeVar("T")


async def run_in_executor(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a synchronous function in an executor.

    Args:
        func: The synchronous function to run
        *args: Positional arguments to pass to the function
        **kwargs: Keyword arguments to pass to the function

    Returns:
        The result of the function call
    """
    loop = asyncio.get_running_loop()

    if kwargs:
        func = partial(func, **kwargs)

    return await loop.run_in_executor(None, func, *args)


async def gather_with_concurrency(
    limit: int, *awaitables: Awaitable[T], return_exceptions: bool = False
) -> list[T | BaseException] | list[T]:
    """Gather awaitables with concurrency limit.

    Args:
        limit: Maximum number of concurrent operations
        *awaitables: Awaitables to execute
        return_exceptions: Whether to return exceptions as results

    Returns:
        List of results from the awaitables, in argument order
    """
    semaphore = asyncio.Semaphore(max(limit, 1))

    async def _limited(awaitable: Awaitable[T]) -> T:
        async with semaphore:
            return await awaitable

    return await asyncio.gather(
        *(_limited(awaitable) for awaitable in awaitables),
        return_exceptions=return_exceptions,
    )


async def defer() -> None:
    """Yield control to the event loop once.

    Code after ``await defer()`` runs on a later loop iteration, never within
    the caller's current step.
    """
    await asyncio.sleep(0)
