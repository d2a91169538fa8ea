################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Named vector and matrix types for common shapes and scalar types.

Suffixes:
    (none)  Real, float32 unless OASIS_MATH_REAL_DOUBLE is set
    f       float32
    d       float64
    i       int32
    ui      uint32
    b       int8
    ub      uint8

Matrix types use the storage layout configured at import time. Generic
families (``Matrix4T``, ``Vector3T``, ...) accept any scalar type, e.g.
``Matrix4T[np.float16]``.
"""

from __future__ import annotations

import numpy as np

from oasis_math.matrix import MatrixFamily
from oasis_math.scalar import real_dtype
from oasis_math.vector import Vector2T
from oasis_math.vector import Vector3T
from oasis_math.vector import Vector4T


Real: np.dtype = real_dtype()

# Vectors

Vector2 = Vector2T[Real]
Vector2f = Vector2T[np.float32]
Vector2d = Vector2T[np.float64]
Vector2i = Vector2T[np.int32]
Vector2ui = Vector2T[np.uint32]
Vector2b = Vector2T[np.int8]
Vector2ub = Vector2T[np.uint8]

Vector3 = Vector3T[Real]
Vector3f = Vector3T[np.float32]
Vector3d = Vector3T[np.float64]
Vector3i = Vector3T[np.int32]
Vector3ui = Vector3T[np.uint32]
Vector3b = Vector3T[np.int8]
Vector3ub = Vector3T[np.uint8]

Vector4 = Vector4T[Real]
Vector4f = Vector4T[np.float32]
Vector4d = Vector4T[np.float64]
Vector4i = Vector4T[np.int32]
Vector4ui = Vector4T[np.uint32]
Vector4b = Vector4T[np.int8]
Vector4ub = Vector4T[np.uint8]

# Square matrices

Matrix2T = MatrixFamily(2, 2)
Matrix2 = Matrix2T[Real]
Matrix2f = Matrix2T[np.float32]
Matrix2d = Matrix2T[np.float64]
Matrix2i = Matrix2T[np.int32]
Matrix2ui = Matrix2T[np.uint32]
Matrix2b = Matrix2T[np.int8]
Matrix2ub = Matrix2T[np.uint8]

Matrix3T = MatrixFamily(3, 3)
Matrix3 = Matrix3T[Real]
Matrix3f = Matrix3T[np.float32]
Matrix3d = Matrix3T[np.float64]
Matrix3i = Matrix3T[np.int32]
Matrix3ui = Matrix3T[np.uint32]
Matrix3b = Matrix3T[np.int8]
Matrix3ub = Matrix3T[np.uint8]

Matrix4T = MatrixFamily(4, 4)
Matrix4 = Matrix4T[Real]
Matrix4f = Matrix4T[np.float32]
Matrix4d = Matrix4T[np.float64]
Matrix4i = Matrix4T[np.int32]
Matrix4ui = Matrix4T[np.uint32]
Matrix4b = Matrix4T[np.int8]
Matrix4ub = Matrix4T[np.uint8]

# Affine matrices

Matrix34T = MatrixFamily(3, 4)
Matrix34 = Matrix34T[Real]
Matrix34f = Matrix34T[np.float32]
Matrix34d = Matrix34T[np.float64]
Matrix34i = Matrix34T[np.int32]
Matrix34ui = Matrix34T[np.uint32]
Matrix34b = Matrix34T[np.int8]
Matrix34ub = Matrix34T[np.uint8]

Matrix43T = MatrixFamily(4, 3)
Matrix43 = Matrix43T[Real]
Matrix43f = Matrix43T[np.float32]
Matrix43d = Matrix43T[np.float64]
Matrix43i = Matrix43T[np.int32]
Matrix43ui = Matrix43T[np.uint32]
Matrix43b = Matrix43T[np.int8]
Matrix43ub = Matrix43T[np.uint8]


__all__ = [
    "Real",
    "Vector2",
    "Vector3",
    "Vector4",
    "Vector2f",
    "Vector3f",
    "Vector4f",
    "Vector2d",
    "Vector3d",
    "Vector4d",
    "Vector2i",
    "Vector3i",
    "Vector4i",
    "Vector2ui",
    "Vector3ui",
    "Vector4ui",
    "Vector2b",
    "Vector3b",
    "Vector4b",
    "Vector2ub",
    "Vector3ub",
    "Vector4ub",
    "Matrix2T",
    "Matrix2",
    "Matrix2f",
    "Matrix2d",
    "Matrix2i",
    "Matrix2ui",
    "Matrix2b",
    "Matrix2ub",
    "Matrix3T",
    "Matrix3",
    "Matrix3f",
    "Matrix3d",
    "Matrix3i",
    "Matrix3ui",
    "Matrix3b",
    "Matrix3ub",
    "Matrix4T",
    "Matrix4",
    "Matrix4f",
    "Matrix4d",
    "Matrix4i",
    "Matrix4ui",
    "Matrix4b",
    "Matrix4ub",
    "Matrix34T",
    "Matrix34",
    "Matrix34f",
    "Matrix34d",
    "Matrix34i",
    "Matrix34ui",
    "Matrix34b",
    "Matrix34ub",
    "Matrix43T",
    "Matrix43",
    "Matrix43f",
    "Matrix43d",
    "Matrix43i",
    "Matrix43ui",
    "Matrix43b",
    "Matrix43ub",
]
