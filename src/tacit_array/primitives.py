"""Couple and join: the row-combining primitives used to rebuild arrays.

Shapes that differ are only reconciled when one of the operands is
fill-marked; the smaller cells are then padded with the kind's fill value and
the result is fill-marked too. Anything else is a shape error attributed to
the caller's context.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

import treelog as log

from .arrayish import ShapeSlice
from .context import DEFAULT_CONTEXT, Context
from .errors import ArrayTypeError
from .fill import common_shape, pad_data

if TYPE_CHECKING:
    from .array import Array

_LOG_RAGGED: Final[bool] = os.environ.get("TACIT_ARRAY_DISABLE_RAGGED_LOG", "0") != "1"


def _check_kinds(left: "Array", right: "Array", where: str, ctx: Context) -> None:
    if left.kind is not right.kind:
        raise ctx.error(f"{where} cannot combine {left.kind.name} and {right.kind.name} arrays", ArrayTypeError)


def _reconcile(left: "Array", right: "Array", left_cell: list[int], right_cell: list[int], where: str, ctx: Context):
    """Common cell shape for the two operands, or raise when they cannot be padded."""
    if left_cell == right_cell:
        return left_cell
    if not (left.fill or right.fill):
        raise ctx.error(f"{where} requires matching cell shapes, got {left_cell} and {right_cell}")
    cell = common_shape(left_cell, right_cell)
    if cell is None:
        raise ctx.error(f"{where} requires matching cell ranks, got {left_cell} and {right_cell}")
    if _LOG_RAGGED:
        log.debug(f"{where} padding cells {left_cell} and {right_cell} to {cell}")
    return cell


def couple(left: "Array", right: "Array", ctx: Context = DEFAULT_CONTEXT) -> "Array":
    """Stack two arrays into a new leading axis of length 2."""
    _check_kinds(left, right, "≍", ctx)
    cell = _reconcile(left, right, left.shape, right.shape, "≍", ctx)
    data = pad_data(left, cell, left.kind) + pad_data(right, cell, right.kind)
    return type(left)([2, *cell], data, left.kind, left.fill or right.fill)


def join(left: "Array", right: "Array", ctx: Context = DEFAULT_CONTEXT) -> "Array":
    """Append ``right`` to ``left`` along the leading axis.

    ``right`` is either a single row of ``left`` (rank one lower) or a block of
    rows of the same rank. Scalars are treated as one-element lists.
    """
    _check_kinds(left, right, "∾", ctx)
    left_shape = list(left.shape) or [1]
    if len(left_shape) == right.rank() + 1:
        right_shape = [1, *right.shape]
    else:
        right_shape = list(right.shape) or [1]
    if len(left_shape) != len(right_shape):
        raise ctx.error(f"∾ cannot join rank {left.rank()} and rank {right.rank()} arrays")

    cell = _reconcile(left, right, left_shape[1:], right_shape[1:], "∾", ctx)
    kind = left.kind
    data = pad_data(ShapeSlice.of(left_shape, left.data), [left_shape[0], *cell], kind)
    data += pad_data(ShapeSlice.of(right_shape, right.data), [right_shape[0], *cell], kind)
    return type(left)([left_shape[0] + right_shape[0], *cell], data, kind, left.fill or right.fill)

