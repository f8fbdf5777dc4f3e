"""Execution context threaded through fallible constructors."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ArrayRuntimeError, ArrayShapeError


@dataclass(frozen=True)
class Context:
    """Opaque call-site handle; only used to attribute errors to a location."""

    where: str = "<runtime>"
    start: int | None = None
    end: int | None = None

    @property
    def span(self) -> tuple[int, int] | None:
        if self.start is None or self.end is None:
            return None
        return (self.start, self.end)

    def error(self, message: str, cls: type[ArrayRuntimeError] = ArrayShapeError) -> ArrayRuntimeError:
        return cls(message, where=self.where, span=self.span)


DEFAULT_CONTEXT = Context()
