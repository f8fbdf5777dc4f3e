"""Conversion between arrays and JAX arrays."""

from __future__ import annotations

import jax
import jax.numpy as jnp

from .array import Array
from .errors import ArrayTypeError
from .values import BYTE, CHARACTER, NUMBER, ElementKind


def _float_dtype():
    # JAX narrows to float32 unless x64 mode is on.
    return jnp.float64 if jax.config.jax_enable_x64 else jnp.float32


def to_jax(array: Array):
    """Dense JAX view of an array's values.

    Numbers and bytes become floats (fill values become NaN); characters
    become int32 codepoints. Function arrays have no numeric form.

    Numbers are stored as float64 when ``jax_enable_x64`` is set and as
    float32 otherwise, so values such as ``0.1`` only survive a round trip
    through ``from_jax`` in x64 mode.
    """
    shape = tuple(array.shape)
    if array.kind is NUMBER:
        return jnp.asarray(array.data, dtype=_float_dtype()).reshape(shape)
    if array.kind is BYTE:
        return jnp.asarray([float(b) for b in array.data], dtype=_float_dtype()).reshape(shape)
    if array.kind is CHARACTER:
        return jnp.asarray([ord(c) for c in array.data], dtype=jnp.int32).reshape(shape)
    raise ArrayTypeError(f"{array.kind.name} arrays have no JAX representation")


def from_jax(value, kind: ElementKind = NUMBER) -> Array:
    arr = jnp.asarray(value)
    shape = [int(d) for d in arr.shape]
    flat = arr.reshape(-1).tolist()
    if kind is NUMBER:
        return Array(shape, [float(x) for x in flat], NUMBER)
    if kind is BYTE:
        return Array(shape, [BYTE.convert(float(x), NUMBER) for x in flat], BYTE)
    if kind is CHARACTER:
        return Array(shape, [chr(int(x)) for x in flat], CHARACTER)
    raise ArrayTypeError(f"{kind.name} arrays cannot be built from JAX values")
