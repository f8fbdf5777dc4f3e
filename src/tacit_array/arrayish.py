"""Ownership-agnostic array-like protocol.

Anything exposing a ``shape`` and a flat row-major ``data`` sequence is
array-like: owned ``Array`` values, ``Row`` projections and borrowed
``(shape, data)`` pairs. Algorithms written against ``Arrayish`` get rank,
flat length, row length, row chunks and shape-prefix matching for free and
never need to copy storage to unify the three.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .views import DataView, MutableDataView


@runtime_checkable
class Arrayish(Protocol):
    shape: Sequence[int]
    data: Sequence

    def rank(self) -> int:
        return len(self.shape)

    def flat_len(self) -> int:
        return len(self.data)

    def row_len(self) -> int:
        return math.prod(self.shape[1:])

    def row_chunks(self) -> Iterator[DataView]:
        """Yield one read-only window per row, in index order."""
        count = self.shape[0] if len(self.shape) else 1
        step = self.row_len()
        data = self.data if isinstance(self.data, DataView) else DataView(self.data)
        for row in range(count):
            yield data.window(row * step, (row + 1) * step)

    def shape_prefixes_match(self, other: "Arrayish") -> bool:
        return all(a == b for a, b in zip(self.shape, other.shape))


@dataclass(frozen=True)
class ShapeSlice(Arrayish):
    """Read-only borrowed ``(shape, data)`` pair."""

    shape: tuple[int, ...]
    data: DataView

    @classmethod
    def of(cls, shape: Sequence[int], data: list, start: int = 0, stop: int | None = None) -> "ShapeSlice":
        return cls(tuple(shape), DataView(data, start, stop))


@dataclass(frozen=True)
class ShapeSliceMut(Arrayish):
    """Mutable borrowed ``(shape, data)`` pair.

    Holding one of these is an exclusive borrow: no other view of the same
    storage may be read while it is written through.
    """

    shape: tuple[int, ...]
    data: MutableDataView

    @classmethod
    def of(cls, shape: Sequence[int], data: list, start: int = 0, stop: int | None = None) -> "ShapeSliceMut":
        return cls(tuple(shape), MutableDataView(data, start, stop))


def as_arrayish(value) -> Arrayish:
    """Pass array-likes through unchanged; borrow ``(shape, data)`` tuples."""
    if isinstance(value, Arrayish):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        shape, data = value
        if isinstance(data, DataView):
            return ShapeSlice(tuple(shape), data)
        return ShapeSlice.of(shape, data)
    raise TypeError(f"{type(value).__name__} is not array-like")
