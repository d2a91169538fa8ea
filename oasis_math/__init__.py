################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from oasis_math.config import MathConfig
from oasis_math.config import get_config
from oasis_math.config import override
from oasis_math.config import set_config
from oasis_math.errors import BoundsError
from oasis_math.errors import InitializerError
from oasis_math.errors import MathError
from oasis_math.errors import ShapeError
from oasis_math.errors import SingularMatrixError
from oasis_math.initializer import Initializer
from oasis_math.matrix import Matrix
from oasis_math.matrix import MatrixFamily
from oasis_math.matrix import matrix_type
from oasis_math.storage_layout import StorageLayout
from oasis_math.tags import UNINITIALIZED
from oasis_math.tags import UninitializeTag
from oasis_math import types
from oasis_math.types import *  # noqa: F401,F403
from oasis_math.vector import Vector2T
from oasis_math.vector import Vector3T
from oasis_math.vector import Vector4T
from oasis_math.vector import VectorBase
from oasis_math.vector import vector_type


__all__ = [
    "BoundsError",
    "Initializer",
    "InitializerError",
    "MathConfig",
    "MathError",
    "Matrix",
    "MatrixFamily",
    "ShapeError",
    "SingularMatrixError",
    "StorageLayout",
    "UNINITIALIZED",
    "UninitializeTag",
    "Vector2T",
    "Vector3T",
    "Vector4T",
    "VectorBase",
    "get_config",
    "matrix_type",
    "override",
    "set_config",
    "vector_type",
]

__all__ += types.__all__
