################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Exception types raised by the vector and matrix primitives."""

from __future__ import annotations


class MathError(Exception):
    """Base class for oasis_math errors."""


class ShapeError(MathError, ValueError):
    """Raised when operand dimensions do not fit the operation."""


class BoundsError(MathError, IndexError):
    """Raised when an element or component index is out of range."""


class InitializerError(MathError, ValueError):
    """Raised when a matrix receives the wrong number of values."""


class SingularMatrixError(MathError, ArithmeticError):
    """Raised when a matrix without an inverse is inverted."""
