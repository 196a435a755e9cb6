from __future__ import annotations

from abc import ABC
from functools import wraps
from types import NotImplementedType
from typing import *

from .utils import CoroT, NoValue, NoValueT, ensure_async_iterator, ensure_coro_fn

_T = TypeVar("_T")
_U = TypeVar("_U")
_R = TypeVar("_R")

_I = TypeVar("_I", contravariant=True)
_O = TypeVar("_O", covariant=True)

_P = ParamSpec("_P")

EitherFn: TypeAlias = Union[Callable[[_I], CoroT[_O]], Callable[[_I], _O]]
EitherIterable: TypeAlias = Union[Iterable[_T], AsyncIterable[_T]]


class Transformer(Generic[_I, _O], ABC):
    """Something that turns an async iterable of `_I` into an async iterator of `_O`.

    Transformers compose with `/` into a `TransformerPipeline`, and are applied to a
    `Stream` with `stream / transformer`.
    """

    def transform(self, src: AsyncIterable[_I]) -> AsyncIterator[_O]:
        raise NotImplementedError

    def __truediv__(self, other: Transformer[_O, _R] | object) -> TransformerPipeline[_I, _R] | NotImplementedType:
        # Transformer / Transformer -> TransformerPipeline
        if isinstance(other, Transformer):
            return TransformerPipeline(self, other)

        # Transformer / Callable -> Transformer @ Map(Callable) -> TransformerPipeline
        if callable(other):
            return TransformerPipeline(self, Map(other))

        return NotImplemented

    def __rtruediv__(self, other: EitherIterable[_I] | object) -> Stream[_O] | NotImplementedType:
        # Iterable / Transformer -> Stream @ Transformer -> Stream
        if isinstance(other, (AsyncIterable, Iterable)):
            return Stream(other).transform(self)
        return NotImplemented


class Stream(AsyncIterator[_T]):
    """An async iterator with operators for building line-processing pipelines.

    - `stream / fn` maps every item through `fn` (sync or async).
    - `stream % fn` keeps the items for which `fn` is truthy.
    - `stream // fn` maps every item to an iterable and flattens the result.

    Examples:
        >>> import asyncio
        >>> asyncio.run((Stream(["1", "", "2"]) % bool / int).to_list())
        [1, 2]
    """

    def __init__(self, src: EitherIterable[_T]) -> None:
        self._src = ensure_async_iterator(src)

    def __aiter__(self) -> AsyncIterator[_T]:
        return self

    async def __anext__(self) -> _T:
        return await self._src.__anext__()

    def transform(self, transformer: Transformer[_T, _R]) -> Stream[_R]:
        cls_ = cast(Type[Stream[_R]], type(self))
        return cls_(transformer.transform(self))

    def __truediv__(self, other: Transformer[_T, _R] | EitherFn[_T, _R] | object) -> Stream[_R] | NotImplementedType:
        """Map the stream using the given function or transformer."""
        if isinstance(other, Transformer):
            return self.transform(other)

        if callable(other):
            return self.transform(Map(other))

        return NotImplemented

    def __floordiv__(self, other: EitherFn[_T, EitherIterable[_R]] | object) -> Stream[_R] | NotImplementedType:
        """Flat-map the stream using the given function."""
        if callable(other):
            return self.transform(FlatMap(other))
        return NotImplemented

    def __mod__(self, other: EitherFn[_T, bool] | object) -> Stream[_T] | NotImplementedType:
        """Filter the stream using the given function or async function as predicate."""
        if callable(other):
            return self.transform(Filter(other))
        return NotImplemented

    async def reduce(
        self,
        fn: Callable[[_U, _T], _U] | Callable[[_U, _T], CoroT[_U]],
        initial: _U | NoValueT = NoValue,
    ) -> _U:
        """Fold the stream into a single value, like `functools.reduce`.

        Raises:
            TypeError: If the stream is empty and no initial value was given.
        """
        _fn = ensure_coro_fn(fn)
        acc = initial
        async for item in self:
            if isinstance(acc, NoValueT):
                acc = item
            else:
                acc = await _fn(acc, item)

        if isinstance(acc, NoValueT):
            raise TypeError("reduce() of empty stream with no initial value")
        return cast(_U, acc)

    async def to_list(self) -> list[_T]:
        """Consume the stream, returning its items in order."""
        return [item async for item in self]


class Map(Transformer[_I, _O]):
    def __init__(self, fn: EitherFn[_I, _O]) -> None:
        self._fn = cast(Callable[[_I], CoroT[_O]], ensure_coro_fn(fn))

    async def transform(self, src: AsyncIterable[_I]) -> AsyncIterator[_O]:
        async for item in src:
            yield await self._fn(item)


class FlatMap(Transformer[_I, _O]):
    def __init__(self, fn: EitherFn[_I, EitherIterable[_O]]) -> None:
        self._fn = cast(Callable[[_I], CoroT[EitherIterable[_O]]], ensure_coro_fn(fn))

    async def transform(self, src: AsyncIterable[_I]) -> AsyncIterator[_O]:
        async for item in src:
            async for sub_item in ensure_async_iterator(await self._fn(item)):
                yield sub_item


class Filter(Transformer[_T, _T]):
    def __init__(self, fn: EitherFn[_T, bool]) -> None:
        self._fn = ensure_coro_fn(fn)

    async def transform(self, src: AsyncIterable[_T]) -> AsyncIterator[_T]:
        async for item in src:
            if await self._fn(item):
                yield item


class TransformerPipeline(Transformer[_I, _O]):
    def __init__(self, t_a: Transformer[_I, _U], t_b: Transformer[_U, _O]) -> None:
        self._t_a = t_a
        self._t_b = t_b

    async def transform(self, src: AsyncIterable[_I]) -> AsyncIterator[_O]:
        async for item in self._t_b.transform(self._t_a.transform(src)):
            yield item


class FnTransformer(Transformer[_I, _O]):
    def __init__(self, fn: Callable[[AsyncIterator[_I]], AsyncIterator[_O]]) -> None:
        self._fn = fn

    async def transform(self, src: EitherIterable[_I]) -> AsyncIterator[_O]:
        async for item in self._fn(ensure_async_iterator(src)):
            yield item


def transformer(
    _fn: Callable[Concatenate[AsyncIterator[_I], _P], AsyncIterator[_O]]
) -> Callable[_P, FnTransformer[_I, _O]]:
    """Turn an async generator function taking a source iterator into a transformer factory.

    The remaining arguments of the decorated function become the arguments of the factory,
    so `take_until("END")` builds a transformer usable as `stream / take_until("END")`.
    """

    @wraps(_fn)
    def _outer(*__args: _P.args, **__kwargs: _P.kwargs) -> FnTransformer[_I, _O]:
        def _inner(_src: AsyncIterator[_I]) -> AsyncIterator[_O]:
            return _fn(_src, *__args, **__kwargs)

        return FnTransformer(_inner)

    return _outer


def stream(__fn: Callable[_P, EitherIterable[_O]]) -> Callable[_P, Stream[_O]]:
    """Wrap a function returning an (async) iterable so that it returns a `Stream`."""

    @wraps(__fn)
    def _outer(*__args: _P.args, **__kwargs: _P.kwargs) -> Stream[_O]:
        return Stream(__fn(*__args, **__kwargs))

    return _outer


__all__ = [
    "Stream",
    "Transformer",
    "Map",
    "FlatMap",
    "Filter",
    "TransformerPipeline",
    "FnTransformer",
    "transformer",
    "stream",
]
