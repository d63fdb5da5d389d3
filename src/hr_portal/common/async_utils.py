from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, TypeVar, Union

T = TypeVar("T")


async def resolve(value: Union[T, Awaitable[T]]) -> T:
    """Await `value` when it is awaitable, return it as-is otherwise.

    Lets callers accept both synchronous and asynchronous collaborators.
    """
    if inspect.isawaitable(value):
        return await value
    return value


def run_sync(coro: Awaitable[T]) -> T:
    """Drive a coroutine to completion from synchronous code (Flask views, scripts)."""
    return asyncio.run(_wrap(coro))


async def _wrap(coro: Awaitable[Any]) -> Any:
    return await coro
