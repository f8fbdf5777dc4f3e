"""Zero-copy windows over an array's flat storage."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice


class DataView(Sequence):
    """Read-only ``[start, stop)`` window over a list, sharing its storage.

    A view stays valid only while the list it borrows from is not resized.
    """

    __slots__ = ("_buffer", "_start", "_stop")

    def __init__(self, buffer: list, start: int = 0, stop: int | None = None) -> None:
        if stop is None:
            stop = len(buffer)
        self._buffer = buffer
        self._start = start
        self._stop = stop

    def __len__(self) -> int:
        return self._stop - self._start

    def _offset(self, index: int) -> int:
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("view index out of range")
        return self._start + index

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                return [self._buffer[self._start + i] for i in range(start, stop, step)]
            return type(self)(self._buffer, self._start + start, self._start + max(start, stop))
        return self._buffer[self._offset(index)]

    def __iter__(self):
        return islice(self._buffer, self._start, self._stop)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, str):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None

    def window(self, start: int, stop: int) -> "DataView":
        """Read-only sub-window, even when taken from a writable view."""
        return DataView(self._buffer, self._start + start, self._start + stop)

    def tolist(self) -> list:
        return self._buffer[self._start:self._stop]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"


class MutableDataView(DataView):
    """Writable window; callers must hold the only live borrow of the buffer."""

    __slots__ = ()

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            values = list(value)
            targets = range(start, stop, step)
            if len(values) != len(targets):
                raise ValueError("slice assignment would resize a fixed-length view")
            for i, v in zip(targets, values):
                self._buffer[self._start + i] = v
            return
        self._buffer[self._offset(index)] = value
