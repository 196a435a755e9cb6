from __future__ import annotations

from typing import AsyncIterator, Callable, TypeVar

from .stream import transformer

_T = TypeVar("_T")


@transformer
async def take_until(
    async_iterator: AsyncIterator[_T], marker: object, key: Callable[[_T], object] | None = None
) -> AsyncIterator[_T]:
    """Yield items until one equals `marker`; the marker itself is not yielded.

    If `key` is given, it is applied to each item before comparing.

    Examples:
        >>> import asyncio
        >>> async def demo_take_until() -> None:
        ...     async for item in ["a", "b", " END ", "c"] / take_until("END", key=str.strip):
        ...         print(item)
        >>> asyncio.run(demo_take_until())
        a
        b
    """
    async for item in async_iterator:
        if (item if key is None else key(item)) == marker:
            return
        yield item


@transformer
async def non_blank(
    async_iterator: AsyncIterator[str], key: Callable[[str], str] = str.strip
) -> AsyncIterator[str]:
    """Drop lines that are empty once `key` (by default `str.strip`) is applied."""
    async for line in async_iterator:
        if key(line):
            yield line


__all__ = ("take_until", "non_blank")
