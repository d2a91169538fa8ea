################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Rotation matrix construction."""

from __future__ import annotations

import math
from typing import Any

from oasis_math.errors import ShapeError


def make_free_rotation(matrix: Any, axis: Any, angle: float) -> None:
    """Write a rotation about an arbitrary axis into a square matrix.

    The rotation is right-handed (counter-clockwise looking down the axis)
    and acts on column vectors:

        R = cos(a) I + sin(a) [k]x + (1 - cos(a)) k kᵀ

    Only the upper-left 3x3 block is written, so seeding the matrix with the
    identity yields a homogeneous rotation for 4x4 matrices.

    Args:
        matrix: square matrix with at least 3 rows
        axis: 3-component unit vector
        angle: rotation angle in radians
    """
    if matrix.rows != matrix.columns:
        raise ShapeError("make_free_rotation can only be used with NxN matrices")
    if matrix.rows < 3:
        raise ShapeError("make_free_rotation requires at least a 3x3 matrix")
    if len(axis) != 3:
        raise ShapeError("axis must have 3 components")

    x: float = float(axis[0])
    y: float = float(axis[1])
    z: float = float(axis[2])

    s: float = math.sin(angle)
    c: float = math.cos(angle)
    cc: float = 1.0 - c

    matrix[0, 0] = x * x * cc + c
    matrix[0, 1] = x * y * cc - z * s
    matrix[0, 2] = x * z * cc + y * s

    matrix[1, 0] = y * x * cc + z * s
    matrix[1, 1] = y * y * cc + c
    matrix[1, 2] = y * z * cc - x * s

    matrix[2, 0] = z * x * cc - y * s
    matrix[2, 1] = z * y * cc + x * s
    matrix[2, 2] = z * z * cc + c
