"""tacit-array public API."""

from .array import Array, validate_shape
from .arrayish import Arrayish, ShapeSlice, ShapeSliceMut, as_arrayish
from .context import Context
from .errors import ArrayError, ArrayRuntimeError, ArrayShapeError, ArrayTypeError
from .functions import Function, Primitive
from .primitives import couple, join
from .rows import Row, RowSequence
from .values import BYTE, CHARACTER, ELEMENT_KINDS, FUNCTION, NUMBER, Byte, ElementKind, kind_by_name, kind_of
from .views import DataView, MutableDataView

try:
    from .interop import from_jax, to_jax
except ModuleNotFoundError as exc:
    if exc.name and exc.name.startswith("jax"):
        _jax_import_error = exc

        def to_jax(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for to_jax(). Install runtime deps first."
            ) from _jax_import_error

        def from_jax(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for from_jax(). Install runtime deps first."
            ) from _jax_import_error

    else:
        raise

__all__ = [
    "Array",
    "validate_shape",
    "Arrayish",
    "ShapeSlice",
    "ShapeSliceMut",
    "as_arrayish",
    "Context",
    "Row",
    "RowSequence",
    "DataView",
    "MutableDataView",
    "couple",
    "join",
    "Function",
    "Primitive",
    "Byte",
    "ElementKind",
    "ELEMENT_KINDS",
    "NUMBER",
    "BYTE",
    "CHARACTER",
    "FUNCTION",
    "kind_of",
    "kind_by_name",
    "to_jax",
    "from_jax",
    "ArrayError",
    "ArrayRuntimeError",
    "ArrayShapeError",
    "ArrayTypeError",
]
