################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Dimension-aware numeric routines for vectors and matrices.

These free functions work on the public interface of the value types
(logical element access, ``to_array``/``assign`` for matrices and ``ptr``
for vectors), which keeps numeric method choices out of the types
themselves.

Determinant:
    Closed forms for 1x1, 2x2 and 3x3. Larger sizes use the LU
    factorization behind numpy.linalg.det.

Inverse:
    Closed-form adjugate divided by the determinant for 1x1, 2x2 and 3x3,
    numpy.linalg.inv above that. A matrix is treated as singular when
    |det| <= SINGULAR_EPS.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from oasis_math.errors import ShapeError
from oasis_math.scalar import to_scalar


_LOG: logging.Logger = logging.getLogger(__name__)

# Determinant magnitude at or below which a matrix has no inverse
SINGULAR_EPS: float = 1e-12


def determinant(matrix: Any) -> Any:
    """Return the determinant of a square matrix as its scalar type."""
    _check_square(matrix, "determinant")
    det: float = _determinant_value(matrix.to_array())
    return _to_scalar(matrix.dtype, det)


def inverse(out: Any, matrix: Any) -> bool:
    """Write the inverse of matrix into out.

    Returns False when matrix is singular, in which case out is left in an
    unspecified state.
    """
    _check_square(matrix, "inverse")
    if (out.rows, out.columns) != (matrix.rows, matrix.columns):
        raise ShapeError("inverse output must match the input shape")

    a: NDArray[np.float64] = np.asarray(matrix.to_array(), dtype=np.float64)
    det: float = _determinant_value(a)
    if not math.isfinite(det) or abs(det) <= SINGULAR_EPS:
        _LOG.debug("Matrix is singular, det=%s", det)
        return False

    size: int = a.shape[0]
    inv: NDArray[np.float64]
    if size == 1:
        inv = np.array([[1.0 / det]], dtype=np.float64)
    elif size == 2:
        inv = np.array(
            [
                [a[1, 1], -a[0, 1]],
                [-a[1, 0], a[0, 0]],
            ],
            dtype=np.float64,
        ) / det
    elif size == 3:
        inv = np.array(
            [
                [
                    a[1, 1] * a[2, 2] - a[1, 2] * a[2, 1],
                    a[0, 2] * a[2, 1] - a[0, 1] * a[2, 2],
                    a[0, 1] * a[1, 2] - a[0, 2] * a[1, 1],
                ],
                [
                    a[1, 2] * a[2, 0] - a[1, 0] * a[2, 2],
                    a[0, 0] * a[2, 2] - a[0, 2] * a[2, 0],
                    a[0, 2] * a[1, 0] - a[0, 0] * a[1, 2],
                ],
                [
                    a[1, 0] * a[2, 1] - a[1, 1] * a[2, 0],
                    a[0, 1] * a[2, 0] - a[0, 0] * a[2, 1],
                    a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0],
                ],
            ],
            dtype=np.float64,
        ) / det
    else:
        try:
            inv = np.linalg.inv(a)
        except np.linalg.LinAlgError as exc:
            _LOG.debug("Matrix inversion failed, %s", exc)
            return False

    out.assign(inv)
    return True


def length_sq(vector: Any) -> Any:
    """Return the squared Euclidean length of a vector."""
    return dot(vector, vector)


def length(vector: Any) -> Any:
    """Return the Euclidean length of a vector."""
    return to_scalar(vector.dtype, math.sqrt(float(length_sq(vector))))


def normalize(vector: Any) -> None:
    """Scale a vector in place to unit length.

    Vectors of zero or unit length are left unchanged.
    """
    len_sq: float = float(length_sq(vector))
    if len_sq != 0.0 and len_sq != 1.0:
        buffer: NDArray = vector.ptr()
        buffer[:] = buffer / math.sqrt(len_sq)


def resize(vector: Any, new_length: float) -> None:
    """Scale a vector in place to the given length.

    Zero-length vectors are left unchanged.
    """
    len_sq: float = float(length_sq(vector))
    if len_sq != 0.0:
        buffer: NDArray = vector.ptr()
        buffer[:] = buffer * (float(new_length) / math.sqrt(len_sq))


def dot(lhs: Any, rhs: Any) -> Any:
    """Return the dot product of two vectors with the same arity."""
    if lhs.components != rhs.components:
        raise ShapeError("dot requires vectors with the same number of components")
    return lhs.dtype.type(np.dot(lhs.ptr(), rhs.ptr()))


def cross(lhs: Any, rhs: Any) -> Any:
    """Return the cross product of two 3-component vectors."""
    if lhs.components != 3 or rhs.components != 3:
        raise ShapeError("cross requires 3-component vectors")
    return type(lhs)(
        lhs.y * rhs.z - lhs.z * rhs.y,
        lhs.z * rhs.x - lhs.x * rhs.z,
        lhs.x * rhs.y - lhs.y * rhs.x,
    )


def _check_square(matrix: Any, name: str) -> None:
    if matrix.rows != matrix.columns:
        raise ShapeError(f"{name} can only be used with NxN matrices")


def _determinant_value(a: NDArray) -> float:
    values: NDArray[np.float64] = np.asarray(a, dtype=np.float64)
    size: int = values.shape[0]
    if size == 1:
        return float(values[0, 0])
    if size == 2:
        return float(values[0, 0] * values[1, 1] - values[0, 1] * values[1, 0])
    if size == 3:
        return float(
            values[0, 0] * (values[1, 1] * values[2, 2] - values[1, 2] * values[2, 1])
            - values[0, 1] * (values[1, 0] * values[2, 2] - values[1, 2] * values[2, 0])
            + values[0, 2] * (values[1, 0] * values[2, 1] - values[1, 1] * values[2, 0])
        )
    return float(np.linalg.det(values))


def _to_scalar(dtype: np.dtype, value: float) -> Any:
    if dtype.kind in "iu":
        # Integer results are exact up to float rounding
        return to_scalar(dtype, round(value))
    return to_scalar(dtype, value)
