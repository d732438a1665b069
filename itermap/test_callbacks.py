# Copyright (c) Meta Platforms, Inc. and affiliates.
import itertools

import pytest
from pydantic import ValidationError

from itermap.callbacks import ChunkArgs, Interleave, InterleaveArgs, chunks
from itermap.iter_map import iter_map


def test_interleave():
    callback = InterleaveArgs(every=3, value=0).build()
    assert isinstance(callback, Interleave)
    assert list(iter_map([1, 2, 3, 4, 5, 6], callback)) == [1, 2, 0, 3, 4, 0, 5, 6, 0]
    assert callback.calls == 10


def test_interleave_every_call():
    it = iter_map("ab", Interleave(every=1, value="-"))
    assert [next(it) for _ in range(3)] == ["-", "-", "-"]


def test_interleave_args_validation():
    with pytest.raises(ValidationError):
        InterleaveArgs(every=0, value=1)
    with pytest.raises(ValidationError):
        InterleaveArgs(every=2, value=1, unknown=True)


def test_interleave_args_require_value():
    with pytest.raises(ValidationError):
        InterleaveArgs(every=3)


def test_interleave_exhausted_source_with_custom_sentinel():
    it = iter_map([1, 2], Interleave(every=3, value=0), sentinel=-1)
    assert list(it) == [1, 2, 0]
    assert list(itertools.islice(iter_map([], Interleave(every=2, value=0)), 5)) == []


def test_chunks():
    assert [list(chunk) for chunk in chunks(range(1, 8), 3)] == [
        [1, 2, 3],
        [4, 5, 6],
        [7],
    ]
    assert [list(chunk) for chunk in chunks(range(6), 3)] == [[0, 1, 2], [3, 4, 5]]


def test_chunks_empty():
    assert list(chunks([], 2)) == []


def test_chunks_keep_none_items():
    assert [list(chunk) for chunk in chunks([None, 1, None], 2)] == [[None, 1], [None]]


def test_chunks_skip_unconsumed_items():
    firsts = [next(chunk) for chunk in ChunkArgs(size=3).build(range(10))]
    assert firsts == [0, 3, 6, 9]


def test_chunk_args_validation():
    with pytest.raises(ValidationError):
        ChunkArgs(size=0)
