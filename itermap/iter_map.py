# Copyright (c) Meta Platforms, Inc. and affiliates.
import abc
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

D = TypeVar("D")
R = TypeVar("R")
T = TypeVar("T")


class IntoIterMap(abc.ABC):
    """
    Mixin that adds `.iter_map()` to any iterable class.

    Subclasses only need to implement `__iter__`. For builtin iterables that
    cannot inherit this class (lists, strings, generators) use the
    module level `iter_map()` function instead.
    """

    @abc.abstractmethod
    def __iter__(self) -> Iterator[Any]:
        pass

    def iter_map(
        self, callback: Callable[[Iterator[Any]], R], sentinel: Any = None
    ) -> "ParamFromFnIter[Iterator[Any], R]":
        """
        Returns a ParamFromFnIter whose data is `iter(self)`. The callback is
        invoked on each pull and receives that iterator, it can return any
        item type, not necessarily the item type of `self`.
        """
        return ParamFromFnIter(iter(self), callback, sentinel=sentinel)


class ParamFromFnIter(IntoIterMap, Generic[D, R]):
    """
    Iterator that invokes `callback(data)` on every `next()` call.

    Does the same thing as `iter(callable, sentinel)` except that the callback
    receives the data the iterator was created with. The data can be anything,
    usually another iterator which the callback advances, skips over or
    replaces with synthesized items.

    Iteration ends when the callback returns `sentinel` (compared by identity)
    or lets a StopIteration escape, e.g. by calling `next()` on an exhausted
    source. The iterator is not fused: pulling again after the end calls the
    callback again.
    """

    def __init__(self, data: D, callback: Callable[[D], R], sentinel: Any = None):
        self._data = data
        self.callback = callback
        self.sentinel = sentinel

    def __iter__(self) -> "ParamFromFnIter[D, R]":
        return self

    def __next__(self) -> R:
        item = self.callback(self._data)
        if item is self.sentinel:
            raise StopIteration
        return item


def iter_map(
    source: Iterable[T],
    callback: Callable[[Iterator[T]], R],
    sentinel: Any = None,
) -> ParamFromFnIter[Iterator[T], R]:
    """
    Wraps `iter(source)` in a ParamFromFnIter driven by `callback`.

    Equivalent to `ParamFromFnIter(iter(source), callback, sentinel)`.
    """
    return ParamFromFnIter(iter(source), callback, sentinel=sentinel)


def from_fn(callback: Callable[[], R], sentinel: Any = None) -> ParamFromFnIter[None, R]:
    return ParamFromFnIter(None, lambda _: callback(), sentinel=sentinel)
