# Copyright (c) Meta Platforms, Inc. and affiliates.
import logging
from typing import Any, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from itermap.iter_map import ParamFromFnIter
from itermap.peekable import Peekable
from itermap.shared import Shared

logger = logging.getLogger(__name__)

_END = object()


class Interleave:
    """
    iter_map callback that returns `value` on every `every`-th call without
    touching the source, and the next source item otherwise.
    """

    def __init__(self, every: int, value: Any):
        self.every = every
        self.value = value
        self.calls = 0

    def __call__(self, source: Iterator[Any]) -> Any:
        self.calls += 1
        if self.calls % self.every == 0:
            return self.value
        return next(source)


class InterleaveArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")
    every: int = Field(gt=0)
    value: Any

    def build(self) -> Interleave:
        logger.debug("Building Interleave(every=%s, value=%r)", self.every, self.value)
        return Interleave(every=self.every, value=self.value)


class _TakeChunk:
    def __init__(self, size: int):
        self.remaining = size

    def __call__(self, shared: Shared[Peekable]) -> Any:
        if self.remaining == 0:
            return _END
        with shared.borrow() as source:
            item = next(source, _END)
        if item is _END:
            self.remaining = 0
        else:
            self.remaining -= 1
        return item


class _NextChunk:
    def __init__(self, size: int):
        self.size = size
        self.current: ParamFromFnIter | None = None

    def __call__(self, shared: Shared[Peekable]) -> Any:
        # Skip whatever the previous chunk left unconsumed
        if self.current is not None:
            for _ in self.current:
                pass
            self.current = None
        with shared.borrow() as source:
            if source.peek(_END) is _END:
                return _END
        self.current = ParamFromFnIter(shared, _TakeChunk(self.size), sentinel=_END)
        return self.current


class ChunkArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")
    size: int = Field(gt=0)

    def build(self, source: Iterable[Any]) -> ParamFromFnIter:
        """
        Splits `source` into lazy chunks of at most `size` items.

        The outer iterator and every chunk it hands out are ParamFromFnIter
        instances sharing one `Shared(Peekable(...))` handle over the source.
        Chunks must be consumed in order, pulling the next chunk skips the rest
        of the previous one.
        """
        logger.debug("Building chunk iterator with size=%s", self.size)
        shared = Shared(Peekable(source))
        return ParamFromFnIter(shared, _NextChunk(self.size), sentinel=_END)


def chunks(source: Iterable[Any], size: int) -> ParamFromFnIter:
    return ChunkArgs(size=size).build(source)
