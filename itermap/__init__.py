# Copyright (c) Meta Platforms, Inc. and affiliates.


class IterMapError(Exception):
    pass


from itermap.iter_map import IntoIterMap, ParamFromFnIter, from_fn, iter_map
from itermap.peekable import Peekable
from itermap.shared import BorrowError, Shared
from itermap.callbacks import ChunkArgs, Interleave, InterleaveArgs, chunks

__all__ = [
    "BorrowError",
    "ChunkArgs",
    "Interleave",
    "InterleaveArgs",
    "IntoIterMap",
    "IterMapError",
    "ParamFromFnIter",
    "Peekable",
    "Shared",
    "chunks",
    "from_fn",
    "iter_map",
]
