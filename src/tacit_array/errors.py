"""Structured error types for the array value core."""

from __future__ import annotations


class ArrayError(Exception):
    """Base class for structured tacit-array errors."""


class ArrayRuntimeError(ArrayError):
    """Recoverable failure reported to the caller through the raised exception."""

    def __init__(self, message: str, *, where: str | None = None, span: tuple[int, int] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.where = where
        self.span = span

    def __str__(self) -> str:
        location = ""
        if self.where is not None:
            location = f" in {self.where}"
        if self.span is not None:
            location += f" at span [{self.span[0]}, {self.span[1]})"
        return f"{self.message}{location}"


class ArrayShapeError(ArrayRuntimeError):
    """Shape/rank compatibility failure while combining arrays."""


class ArrayTypeError(ArrayRuntimeError):
    """Element-kind compatibility failure."""
