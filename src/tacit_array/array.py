"""Shape-tagged, flat-storage array value shared by every element kind."""

from __future__ import annotations

import math
import os
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Final

import treelog as log

from .arrayish import Arrayish
from .context import DEFAULT_CONTEXT, Context
from .fill import is_fill_row
from .primitives import couple, join
from .rows import RowSequence
from .values import CHARACTER, NUMBER, ElementKind, kind_of
from .views import DataView, MutableDataView

_CHECK_SHAPES: Final[bool] = os.environ.get("TACIT_ARRAY_DISABLE_SHAPE_CHECKS", "0") != "1"


def validate_shape(shape: Sequence[int], data: Sequence) -> None:
    """Debug-only check of ``len(data) == product(shape)``.

    This is a contract callers uphold, not a runtime-checked guarantee: the
    assertion disappears under ``python -O`` (and with
    ``TACIT_ARRAY_DISABLE_SHAPE_CHECKS=1``).
    """
    if _CHECK_SHAPES:
        assert math.prod(shape) == len(data), f"shape {list(shape)} does not match data length {len(data)}"


@dataclass(eq=False, repr=False)
class Array(Arrayish):
    """Row-major array: ``shape`` + flat ``data`` + ragged ``fill`` flag.

    The array owns ``data`` exclusively; no two arrays share a buffer, although
    ``Row`` and ``DataView`` projections may borrow from it.
    """

    shape: list[int]
    data: list
    kind: ElementKind | None = None
    fill: bool | None = None

    def __post_init__(self) -> None:
        self.shape = list(self.shape)
        self.data = list(self.data)
        if self.kind is None:
            self.kind = kind_of(self.data[0]) if self.data else NUMBER
        if self.fill is None:
            self.fill = self.kind.default_fill
        validate_shape(self.shape, self.data)

    @classmethod
    def unit(cls, value, kind: ElementKind | None = None) -> "Array":
        return cls([], [value], kind)

    @classmethod
    def from_list(cls, values: Iterable, kind: ElementKind | None = None) -> "Array":
        data = list(values)
        return cls([len(data)], data, kind)

    @classmethod
    def from_string(cls, text: str) -> "Array":
        return cls([len(text)], list(text), CHARACTER)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Array":
        """Rank-2 character array, shorter lines padded with the fill character."""
        lines = list(lines)
        width = max((len(line) for line in lines), default=0)
        fill = CHARACTER.fill_value()
        data: list[str] = []
        for line in lines:
            data.extend(line)
            data.extend(fill * (width - len(line)))
        return cls([len(lines), width], data, CHARACTER)

    @classmethod
    def empty(cls, kind: ElementKind = NUMBER) -> "Array":
        return cls([0], [], kind)

    def copy(self) -> "Array":
        return Array(list(self.shape), list(self.data), self.kind, self.fill)

    def validate_shape(self) -> None:
        validate_shape(self.shape, self.data)

    def rank(self) -> int:
        return len(self.shape)

    def row_count(self) -> int:
        return self.shape[0] if self.shape else 1

    def row_len(self) -> int:
        return math.prod(self.shape[1:])

    def flat_len(self) -> int:
        return len(self.data)

    def len(self) -> int:
        """Logical length: leading non-fill elements for lists, else the row count."""
        if self.rank() == 1:
            is_fill = self.kind.is_fill_value
            count = 0
            for x in self.data:
                if is_fill(x):
                    break
                count += 1
            return count
        return self.row_count()

    def __len__(self) -> int:
        return self.len()

    def __bool__(self) -> bool:
        # Truthiness follows storage, not the fill-aware length.
        return bool(self.data)

    def reset_fill(self) -> None:
        self.fill = self.kind.default_fill

    def convert(self, kind: ElementKind, fn: Callable | None = None) -> "Array":
        """Map every element into ``kind``, keeping shape and fill flag."""
        if fn is None:
            source = self.kind

            def fn(x):
                return kind.convert(x, source)

        return Array(list(self.shape), [fn(x) for x in self.data], kind, self.fill)

    def empty_row(self) -> "Array":
        """Identity element for folds over the rows of this array.

        Rank 0 arrays return a copy of themselves. Otherwise the result has
        this array's shape without the leading dimension. An array with that
        shape and no data would fail ``validate_shape`` whenever the shape has
        no zero dimension, so the row is built from fill values instead and
        marked ``fill=True``: it stores ``row_len()`` elements yet is logically
        empty (``len()`` is 0 for lists, ``truncate`` drops it).
        """
        if self.rank() == 0:
            return self.copy()
        shape = self.shape[1:]
        data = [self.kind.fill_value() for _ in range(math.prod(shape))]
        return Array(shape, data, self.kind, True)

    def row(self, index: int) -> DataView:
        if not 0 <= index < self.row_count():
            raise IndexError(f"row {index} out of range for {self.row_count()} rows")
        step = self.row_len()
        return DataView(self.data, index * step, (index + 1) * step)

    def rows(self) -> RowSequence:
        return RowSequence(self)

    def rows_mut(self) -> Iterator[MutableDataView]:
        """Writable row windows in index order.

        Requires exclusive access to the array: read-only rows taken before
        must not be used until iteration is over.
        """
        step = self.row_len()
        for index in range(self.row_count()):
            yield MutableDataView(self.data, index * step, (index + 1) * step)

    def _take_rows(self) -> tuple[list, list[int], int, int]:
        row_shape = self.shape[1:]
        count = self.row_count()
        step = self.row_len()
        data = self.data
        self.shape, self.data = [0], []
        return data, row_shape, count, step

    def into_rows(self) -> Iterator["Array"]:
        """Consume the array into owned rows, front to back.

        The array itself is left as the canonical empty array.
        """
        data, row_shape, count, step = self._take_rows()
        kind = self.kind

        def drain():
            for index in range(count):
                yield Array(list(row_shape), data[index * step:(index + 1) * step], kind)

        return drain()

    def into_rows_rev(self) -> Iterator["Array"]:
        """Consume the array into owned rows, back to front."""
        data, row_shape, count, step = self._take_rows()
        kind = self.kind

        def drain():
            for _ in range(count):
                end = len(data) - step
                row = data[end:]
                del data[end:]
                yield Array(list(row_shape), row, kind)

        return drain()

    @classmethod
    def from_row_arrays(
        cls,
        rows: Iterable["Array"],
        fill: bool = False,
        ctx: Context = DEFAULT_CONTEXT,
        *,
        kind: ElementKind = NUMBER,
    ) -> "Array":
        """Rebuild one array from rows.

        No rows give the canonical empty array of ``kind``; a single row gains
        a leading dimension of 1. Otherwise the first two rows are coupled and
        each later row joined on, with ``fill`` OR'd into every row after the
        first. The input rows are left untouched. Couple/join failures
        propagate unchanged.
        """
        row_values = iter(rows)
        first = next(row_values, None)
        if first is None:
            return cls.empty(kind)
        value = first
        count = 1
        for row in row_values:
            if fill and not row.fill:
                row = cls(row.shape, row.data, row.kind, True)
            count += 1
            value = couple(value, row, ctx) if count == 2 else join(value, row, ctx)
        if count == 1:
            return cls([1, *first.shape], first.data, first.kind, first.fill)
        return value

    def truncate(self) -> None:
        """Drop trailing rows made up entirely of fill values."""
        if not self.fill or self.rank() == 0:
            return
        new_len = self.row_count()
        for row in reversed(self.rows()):
            if not is_fill_row(row, self.kind):
                break
            new_len = row.index
        if new_len == self.row_count():
            return
        log.debug(f"truncating {self.row_count() - new_len} fill rows")
        del self.data[new_len * self.row_len():]
        self.shape[0] = new_len

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.shape != other.shape or len(self.data) != len(other.data):
            return False
        cmp = self.kind.cmp
        return all(cmp(a, b) == 0 for a, b in zip(_real_run(self), _real_run(other)))

    __hash__ = None

    def cmp(self, other: "Array") -> int:
        return _cmp_data(self.kind, self.data, other.data)

    def __lt__(self, other: "Array") -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.val_cmp(other) < 0

    def __le__(self, other: "Array") -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.val_cmp(other) <= 0

    def __gt__(self, other: "Array") -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.val_cmp(other) > 0

    def __ge__(self, other: "Array") -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.val_cmp(other) >= 0

    def val_eq(self, other: "Array") -> bool:
        """Element-wise equality after converting ``other`` into this kind; no fill skipping."""
        if self.shape != other.shape or len(self.data) != len(other.data):
            return False
        kind, source = self.kind, other.kind
        return all(kind.eq(a, kind.convert(b, source)) for a, b in zip(self.data, other.data))

    def val_cmp(self, other: "Array") -> int:
        kind, source = self.kind, other.kind
        return _cmp_data(kind, self.data, [kind.convert(b, source) for b in other.data])

    def __str__(self) -> str:
        fmt = self.kind.format_value
        if self.rank() == 0:
            return fmt(self.data[0])
        if self.rank() == 1:
            start, end = self.kind.delims
            return start + self.kind.sep.join(fmt(x) for x in self.data) + end
        dims = " ".join(str(d) for d in self.shape)
        return "[" + dims + "," + "".join(" " + fmt(x) for x in self.data) + "]"

    __repr__ = __str__


def _real_run(array: Array) -> Iterator:
    """Elements after any leading fill run, up to the next fill value."""
    is_fill = array.kind.is_fill_value
    items = iter(array.data)
    for x in items:
        if not is_fill(x):
            yield x
            break
    for x in items:
        if is_fill(x):
            return
        yield x


def _cmp_data(kind: ElementKind, a: Sequence, b: Sequence) -> int:
    cmp = kind.cmp
    for x, y in zip(a, b):
        order = cmp(x, y)
        if order:
            return order
    return (len(a) > len(b)) - (len(a) < len(b))
