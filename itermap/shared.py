# Copyright (c) Meta Platforms, Inc. and affiliates.
import logging
from typing import Any, Generic, TypeVar

from itermap import IterMapError
from itermap.iter_map import IntoIterMap

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BorrowError(IterMapError):
    pass


class _Borrow(Generic[T]):
    def __init__(self, shared: "Shared[T]"):
        self.shared = shared

    def __enter__(self) -> T:
        if self.shared._borrowed:
            logger.warning("Shared value is already borrowed: %r", self.shared)
            raise BorrowError("Shared value is already borrowed")
        self.shared._borrowed = True
        return self.shared._value

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shared._borrowed = False


class Shared(IntoIterMap, Generic[T]):
    """
    Shared handle to a single value with runtime checked exclusive access.

    This is the composition idiom for generator style pipelines: two
    ParamFromFnIter instances built on the same Shared handle can both
    observe and advance one underlying source, e.g. an outer iterator that
    hands out inner chunk iterators (see `itermap.callbacks.ChunkArgs`).

    Access goes through `borrow()`. A second borrow while the first one is
    still active raises BorrowError instead of silently interleaving two
    mutations of the same value. The check is single threaded only, callers
    sharing a handle across threads must synchronize themselves.

    When the value is an iterator the handle is itself an iterator, each
    `next()` borrows the value for exactly one step.
    """

    def __init__(self, value: T):
        self._value = value
        self._borrowed = False

    def __repr__(self) -> str:
        return f"Shared({self._value!r}, borrowed={self._borrowed})"

    @property
    def is_borrowed(self) -> bool:
        return self._borrowed

    def borrow(self) -> _Borrow[T]:
        return _Borrow(self)

    def replace(self, value: T) -> T:
        if self._borrowed:
            logger.warning("Cannot replace a borrowed shared value: %r", self)
            raise BorrowError("Cannot replace a shared value while it is borrowed")
        old_value = self._value
        self._value = value
        return old_value

    def __iter__(self) -> "Shared[T]":
        return self

    def __next__(self) -> Any:
        with self.borrow() as value:
            return next(value)
