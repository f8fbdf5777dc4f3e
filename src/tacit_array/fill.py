"""Fill-sentinel padding for ragged rows."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import product

from .arrayish import Arrayish
from .values import ElementKind


def is_fill_row(row: Iterable, kind: ElementKind) -> bool:
    """True when every element of ``row`` is the kind's fill sentinel."""
    return all(kind.is_fill_value(x) for x in row)


def common_shape(a: Sequence[int], b: Sequence[int]) -> list[int] | None:
    """Smallest shape containing both equal-rank shapes, or None on rank mismatch."""
    if len(a) != len(b):
        return None
    return [max(x, y) for x, y in zip(a, b)]


def pad_data(source: Arrayish, shape: Sequence[int], kind: ElementKind) -> list:
    """Lay ``source`` out in the larger ``shape``, padding new cells with fill.

    ``shape`` must have the source's rank and be at least as large in every
    dimension.
    """
    src_shape = list(source.shape)
    if src_shape == list(shape):
        return list(source.data)
    assert len(src_shape) == len(shape) and all(s <= t for s, t in zip(src_shape, shape)), (
        f"cannot pad shape {src_shape} into {list(shape)}"
    )
    out = [kind.fill_value() for _ in range(math.prod(shape))]
    if not src_shape:
        out[0] = source.data[0]
        return out
    strides = [math.prod(shape[axis + 1:]) for axis in range(len(shape))]
    # Copy whole innermost runs; only the outer axes are enumerated.
    inner = src_shape[-1]
    data = source.data
    src_offset = 0
    for outer in product(*(range(d) for d in src_shape[:-1])):
        dst_offset = sum(i * s for i, s in zip(outer, strides))
        out[dst_offset:dst_offset + inner] = data[src_offset:src_offset + inner]
        src_offset += inner
    return out
