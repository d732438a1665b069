# Copyright (c) Meta Platforms, Inc. and affiliates.
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from itermap.iter_map import IntoIterMap

T = TypeVar("T")

_MISSING = object()


class Peekable(IntoIterMap, Generic[T]):
    """
    Iterator with a single item of lookahead.

    Lets an iter_map callback inspect the next source item before deciding
    whether to consume it.
    """

    def __init__(self, iterable: Iterable[T]):
        self.iterator: Iterator[T] = iter(iterable)
        self.peeked: Any = _MISSING

    def __iter__(self) -> "Peekable[T]":
        return self

    def __next__(self) -> T:
        if self.peeked is not _MISSING:
            item = self.peeked
            self.peeked = _MISSING
            return item
        return next(self.iterator)

    def peek(self, default: Any = _MISSING) -> T:
        if self.peeked is _MISSING:
            try:
                self.peeked = next(self.iterator)
            except StopIteration:
                if default is _MISSING:
                    raise
                return default
        return self.peeked

    def next_if(self, predicate: Callable[[T], bool], default: Any = None) -> T:
        """
        Consumes and returns the next item only if `predicate` accepts it,
        otherwise returns `default` and leaves the item in place.
        """
        end = object()
        item = self.peek(end)
        if item is end or not predicate(item):
            return default
        return next(self)
