"""Function references stored as array elements."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Final


class Primitive(str, Enum):
    NOOP = "·"
    IDENTITY = "⊢"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    COUPLE = "≍"
    JOIN = "∾"
    RESHAPE = "⥊"
    REVERSE = "⌽"

    @property
    def ordinal(self) -> int:
        return _PRIMITIVE_ORDER[self]


_PRIMITIVE_ORDER: Final[dict[Primitive, int]] = {prim: idx for idx, prim in enumerate(Primitive)}
_DEFINITION_COUNTER = itertools.count()


@dataclass(frozen=True, eq=False)
class Function:
    """Shared, immutable handle to a primitive or a user-defined function.

    Arrays hold these by reference; equality and ordering never look at the
    function body. Primitives compare by their declaration order in
    ``Primitive`` and sort before user functions, which compare by the order
    in which they were defined.
    """

    name: str
    primitive: Primitive | None = None
    body: object = None
    definition: int = field(default_factory=lambda: next(_DEFINITION_COUNTER))

    @classmethod
    def from_primitive(cls, primitive: Primitive) -> "Function":
        return cls(name=primitive.value, primitive=primitive)

    def as_primitive(self) -> Primitive | None:
        return self.primitive

    @property
    def sort_key(self) -> tuple[int, int]:
        if self.primitive is not None:
            return (0, self.primitive.ordinal)
        return (1, self.definition)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Function):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: "Function") -> bool:
        if not isinstance(other, Function):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)

    def __str__(self) -> str:
        return self.name
