"""Element kinds storable in an array and their ordering/fill contract."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, Final

from .errors import ArrayTypeError
from .functions import Function, Primitive


@total_ordering
@dataclass(frozen=True)
class Byte:
    """Small integer in ``0..255`` with a dedicated fill variant.

    ``Byte(None)`` is the fill variant (``Byte.FILL``); it orders after every
    ordinary value.
    """

    value: int | None

    FILL: ClassVar["Byte"]

    def __post_init__(self) -> None:
        if self.value is not None and not 0 <= self.value <= 255:
            raise ValueError(f"Byte value {self.value} is outside 0..255")

    @property
    def is_fill(self) -> bool:
        return self.value is None

    def __lt__(self, other: "Byte") -> bool:
        if not isinstance(other, Byte):
            return NotImplemented
        return _byte_key(self) < _byte_key(other)

    def __float__(self) -> float:
        if self.value is None:
            return math.nan
        return float(self.value)

    def __int__(self) -> int:
        if self.value is None:
            raise ValueError("fill byte has no integer value")
        return self.value

    def __str__(self) -> str:
        return "_" if self.value is None else str(self.value)


Byte.FILL = Byte(None)


def _byte_key(b: Byte) -> tuple[int, int]:
    return (1, 0) if b.value is None else (0, b.value)


def _sign(a, b) -> int:
    return (a > b) - (a < b)


class ElementKind:
    """Capability set shared by every element kind.

    The set of kinds is closed: ``NUMBER``, ``BYTE``, ``CHARACTER`` and
    ``FUNCTION`` are the only instances, and no further subclasses may be
    declared once they exist.
    """

    name: ClassVar[str]
    default_fill: ClassVar[bool] = False
    delims: ClassVar[tuple[str, str]] = ("[", "]")
    sep: ClassVar[str] = " "
    _sealed: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs) -> None:
        if ElementKind._sealed:
            raise TypeError("the set of element kinds is closed")
        super().__init_subclass__(**kwargs)

    def cmp(self, a, b) -> int:
        raise NotImplementedError

    def eq(self, a, b) -> bool:
        return self.cmp(a, b) == 0

    def fill_value(self):
        raise NotImplementedError

    def is_fill_value(self, value) -> bool:
        return False

    def format_value(self, value) -> str:
        return str(value)

    def convert(self, value, source: "ElementKind"):
        if source is self:
            return value
        raise ArrayTypeError(f"cannot convert {source.name} to {self.name}")

    def __repr__(self) -> str:
        return f"<{self.name} kind>"


class _NumberKind(ElementKind):
    name = "number"

    def cmp(self, a, b) -> int:
        if a < b:
            return -1
        if a > b:
            return 1
        if a == b:
            return 0
        # Unordered: NaN ranks above every number and equals itself.
        return _sign(math.isnan(a), math.isnan(b))

    def fill_value(self) -> float:
        return math.nan

    def is_fill_value(self, value) -> bool:
        return math.isnan(value)

    def format_value(self, value) -> str:
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if float(value).is_integer():
            return str(int(value))
        return repr(float(value))

    def convert(self, value, source: ElementKind):
        if source is BYTE:
            return float(value)
        return super().convert(value, source)


class _ByteKind(ElementKind):
    name = "byte"

    def cmp(self, a: Byte, b: Byte) -> int:
        return _sign(_byte_key(a), _byte_key(b))

    def fill_value(self) -> Byte:
        return Byte.FILL

    def is_fill_value(self, value: Byte) -> bool:
        return value == Byte.FILL

    def convert(self, value, source: ElementKind):
        if source is NUMBER:
            if math.isnan(value):
                return Byte.FILL
            if float(value).is_integer() and 0 <= value <= 255:
                return Byte(int(value))
            raise ArrayTypeError(f"number {value} cannot be stored as a byte")
        return super().convert(value, source)


class _CharacterKind(ElementKind):
    name = "character"
    default_fill = True
    delims = ("", "")
    sep = ""

    def cmp(self, a: str, b: str) -> int:
        return _sign(a, b)

    def fill_value(self) -> str:
        return "\x00"

    def is_fill_value(self, value: str) -> bool:
        return value == "\x00"


class _FunctionKind(ElementKind):
    name = "function"

    def cmp(self, a: Function, b: Function) -> int:
        return _sign(a.sort_key, b.sort_key)

    def fill_value(self) -> Function:
        return Function.from_primitive(Primitive.NOOP)

    def is_fill_value(self, value: Function) -> bool:
        return value.as_primitive() is Primitive.NOOP


NUMBER: Final[ElementKind] = _NumberKind()
BYTE: Final[ElementKind] = _ByteKind()
CHARACTER: Final[ElementKind] = _CharacterKind()
FUNCTION: Final[ElementKind] = _FunctionKind()
ElementKind._sealed = True

ELEMENT_KINDS: Final[tuple[ElementKind, ...]] = (NUMBER, BYTE, CHARACTER, FUNCTION)


def kind_of(value: object) -> ElementKind:
    if isinstance(value, Byte):
        return BYTE
    if isinstance(value, Function):
        return FUNCTION
    if isinstance(value, str):
        if len(value) != 1:
            raise ArrayTypeError("character elements must contain exactly one codepoint")
        return CHARACTER
    if isinstance(value, numbers.Real):
        return NUMBER
    raise ArrayTypeError(f"unsupported element type {type(value).__name__}")


def kind_by_name(name: str) -> ElementKind:
    for kind in ELEMENT_KINDS:
        if kind.name == name:
            return kind
    raise ArrayTypeError(f"unknown element kind {name!r}")
