from __future__ import annotations

import asyncio
import functools
import inspect
from typing import *

_T = TypeVar("_T")
_R = TypeVar("_R")
_P = ParamSpec("_P")

CoroT: TypeAlias = Coroutine[Any, Any, _T]


class NoValueT:
    """Sentinel type for "no initial value was given"."""

    def __repr__(self) -> str:
        return "NoValue"


NoValue = NoValueT()


def run_sync(f: Callable[_P, CoroT[_T]]) -> Callable[_P, _T]:
    """Given a coroutine function, return a function that runs it to completion with asyncio.

    This is what lets the async solvers be used from the synchronous CLI entry point.

    Args:
        f: The coroutine function to run synchronously.

    Returns:
        A new function that runs the original one with `asyncio.run`.
    """

    @functools.wraps(f)
    def decorated(*args: _P.args, **kwargs: _P.kwargs) -> _T:
        return asyncio.run(f(*args, **kwargs))

    return decorated


def iter_to_aiter(iterable: Iterable[_T]) -> AsyncIterator[_T]:
    """Convert an iterable to an async iterator, yielding control to the loop between items."""

    async def _inner() -> AsyncIterator[_T]:
        for it in iterable:
            yield it
            await asyncio.sleep(0)

    return _inner()


@overload
def ensure_coro_fn(fn: Callable[_P, CoroT[_T]]) -> Callable[_P, CoroT[_T]]:
    ...


@overload
def ensure_coro_fn(fn: Callable[_P, _T]) -> Callable[_P, CoroT[_T]]:
    ...


def ensure_coro_fn(fn: Callable[_P, _T] | Callable[_P, CoroT[_T]]) -> Callable[_P, CoroT[_T]]:
    """Given a sync or async function, return an async function.

    Args:
        fn: The function to ensure is async.

    Returns:
        An async function that runs the original function.
    """

    if inspect.iscoroutinefunction(fn):
        return fn

    _sync_fn = cast(Callable[_P, _R], fn)

    @functools.wraps(_sync_fn)
    async def _async_fn(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        return _sync_fn(*args, **kwargs)

    return _async_fn


def ensure_async_iterator(iterable: Iterable[_T] | AsyncIterable[_T]) -> AsyncIterator[_T]:
    """Given an iterable or async iterable, return an async iterator over it."""

    if isinstance(iterable, AsyncIterable):
        return aiter(iterable)

    return iter_to_aiter(iterable)


__all__ = (
    "NoValue",
    "NoValueT",
    "run_sync",
    "iter_to_aiter",
    "ensure_coro_fn",
    "ensure_async_iterator",
)
