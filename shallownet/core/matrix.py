"""Dense matrix primitives shared by the forward and backward passes."""

from __future__ import annotations

from typing import Callable

import numpy as np

from .errors import InvalidAxis
from .types import Array

AXIS_COLUMNS = 0
AXIS_ROWS = 1

ApplyFn = Callable[[Array, Array, Array], Array]


def as_matrix(x: Array) -> Array:
    """Return ``x`` as a two-dimensional float64 array."""

    m = np.asarray(x, dtype=np.float64)
    if m.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got an array with {m.ndim} dimension(s)")
    return m


def apply(fn: ApplyFn, m: Array) -> Array:
    """Evaluate ``fn(row, col, value)`` for every element of ``m``.

    ``row`` and ``col`` are passed as broadcastable index arrays, so ``fn``
    must be an elementwise expression; the result is a new matrix.
    """

    m = as_matrix(m)
    rows = np.arange(m.shape[0]).reshape(-1, 1)
    cols = np.arange(m.shape[1]).reshape(1, -1)
    out = np.asarray(fn(rows, cols, m), dtype=np.float64)
    if out.shape != m.shape:
        out = np.broadcast_to(out, m.shape).copy()
    return out


def add_row_bias(m: Array, bias: Array) -> Array:
    """Add the ``1 x C`` row ``bias`` to every row of ``m``."""

    m = as_matrix(m)
    bias = as_matrix(bias)
    if bias.shape != (1, m.shape[1]):
        raise ValueError(f"Bias of shape {bias.shape} does not fit a matrix with {m.shape[1]} columns")
    return apply(lambda _, col, v: v + bias[0, col], m)


def sum_along_axis(axis: int, m: Array) -> Array:
    """Sum ``m`` by column (``axis=0``, 1 x C) or by row (``axis=1``, N x 1)."""

    m = as_matrix(m)
    if (
        not isinstance(axis, (int, np.integer))
        or isinstance(axis, (bool, np.bool_))
        or axis not in (AXIS_COLUMNS, AXIS_ROWS)
    ):
        raise InvalidAxis(f"invalid axis {axis!r}: expected {AXIS_COLUMNS} (columns) or {AXIS_ROWS} (rows)")
    if axis == AXIS_COLUMNS:
        return m.sum(axis=0).reshape(1, -1)
    return m.sum(axis=1).reshape(-1, 1)


def _check_same_shape(a: Array, b: Array, op: str) -> None:
    if a.shape != b.shape:
        raise ValueError(f"{op}: shape mismatch {a.shape} vs {b.shape}")


def scale(alpha: float, m: Array) -> Array:
    return float(alpha) * as_matrix(m)


def add(a: Array, b: Array) -> Array:
    a, b = as_matrix(a), as_matrix(b)
    _check_same_shape(a, b, "add")
    return a + b


def sub(a: Array, b: Array) -> Array:
    a, b = as_matrix(a), as_matrix(b)
    _check_same_shape(a, b, "sub")
    return a - b


def mul_elem(a: Array, b: Array) -> Array:
    """Elementwise (Hadamard) product."""

    a, b = as_matrix(a), as_matrix(b)
    _check_same_shape(a, b, "mul_elem")
    return a * b


def mul(a: Array, b: Array) -> Array:
    """Matrix product ``a @ b``."""

    a, b = as_matrix(a), as_matrix(b)
    if a.shape[1] != b.shape[0]:
        raise ValueError(f"mul: inner dimensions differ {a.shape} @ {b.shape}")
    return a @ b


def transpose(m: Array) -> Array:
    return as_matrix(m).T


__all__ = [
    "AXIS_COLUMNS",
    "AXIS_ROWS",
    "add",
    "add_row_bias",
    "apply",
    "as_matrix",
    "mul",
    "mul_elem",
    "scale",
    "sub",
    "sum_along_axis",
    "transpose",
]
