"""Non-owning row projections of an array."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .arrayish import Arrayish
from .views import DataView

if TYPE_CHECKING:
    from .array import Array


@dataclass(frozen=True, eq=False)
class Row(Arrayish):
    """The ``index``-th top-level slice of ``array``.

    Holds only the back-reference and the index, so copying a row is free.
    A row must not be used after its array is resized or mutated through
    ``rows_mut``.
    """

    array: "Array"
    index: int

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self.array.shape[1:])

    @property
    def data(self) -> DataView:
        return self.array.row(self.index)

    def __len__(self) -> int:
        return self.array.row_len()

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        eq = self.array.kind.eq
        return all(eq(a, b) for a, b in zip(self.data, other.data))

    __hash__ = None

    def cmp(self, other: "Row") -> int:
        cmp = self.array.kind.cmp
        for a, b in zip(self.data, other.data):
            order = cmp(a, b)
            if order:
                return order
        # Ties fall back to the owning arrays' flat lengths, not the rows'.
        mine, theirs = self.array.flat_len(), other.array.flat_len()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: "Row") -> bool:
        return self.cmp(other) < 0

    def __le__(self, other: "Row") -> bool:
        return self.cmp(other) <= 0

    def __gt__(self, other: "Row") -> bool:
        return self.cmp(other) > 0

    def __ge__(self, other: "Row") -> bool:
        return self.cmp(other) >= 0

    def to_array(self) -> "Array":
        from .array import Array

        return Array(list(self.shape), self.data.tolist(), self.array.kind)


class RowSequence(Sequence):
    """Restartable sequence of ``Row`` views, one per row of the array."""

    __slots__ = ("_array",)

    def __init__(self, array: "Array") -> None:
        self._array = array

    def __len__(self) -> int:
        return self._array.row_count()

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [Row(self._array, i) for i in range(*index.indices(len(self)))]
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("row index out of range")
        return Row(self._array, index)

    def __iter__(self):
        for index in range(len(self)):
            yield Row(self._array, index)

    def __reversed__(self):
        for index in reversed(range(len(self))):
            yield Row(self._array, index)
