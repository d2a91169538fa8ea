################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Scalar type handling for vector and matrix specializations."""

from __future__ import annotations

import numbers
import operator

import numpy as np

from oasis_math.config import get_config
from oasis_math.errors import BoundsError
from oasis_math.errors import ShapeError


def resolve_dtype(scalar_type: object) -> np.dtype:
    """Return the numpy dtype for a scalar type argument.

    Accepts numpy scalar types, dtypes, dtype names and the Python builtins
    ``int``, ``float`` and ``bool``. ``None`` resolves to the configured
    ``Real`` type.
    """
    if scalar_type is None:
        return get_config().real_dtype
    try:
        dtype: np.dtype = np.dtype(scalar_type)  # type: ignore[call-overload]
    except TypeError as exc:
        raise TypeError(f"unsupported scalar type: {scalar_type!r}") from exc
    if dtype.kind not in "biuf":
        raise TypeError(f"scalar type must be arithmetic, got {dtype.name}")
    return dtype


def real_dtype() -> np.dtype:
    """Return the dtype behind the ``Real`` aliases."""
    return get_config().real_dtype


def is_scalar(value: object) -> bool:
    """Return True for Python and numpy numbers."""
    return isinstance(value, (numbers.Number, np.generic)) and not isinstance(
        value, (complex, np.complexfloating)
    )


def as_dimension(value: object, name: str) -> int:
    """Return a positive integer dimension."""
    if isinstance(value, bool):
        raise ShapeError(f"{name} must be an integer")
    try:
        dimension: int = operator.index(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise ShapeError(f"{name} must be an integer") from exc
    if dimension < 1:
        raise ShapeError(f"{name} must be >= 1")
    return dimension


def check_index(index: object, limit: int, name: str) -> int:
    """Return index as an int, raising BoundsError when out of range.

    The range check is skipped when bounds checks are disabled.
    """
    value: int = operator.index(index)  # type: ignore[arg-type]
    if get_config().bounds_checks and not 0 <= value < limit:
        raise BoundsError(f"{name} {value} out of range [0, {limit})")
    return value


def to_scalar(dtype: np.dtype, value: object) -> np.generic:
    """Convert a Python or numpy number to dtype.

    Integer types wrap modulo 2**bits the way fixed-width arithmetic does,
    so -1 becomes 255 for uint8. Fractional values are truncated toward zero
    first.
    """
    if dtype.kind not in "iu":
        return dtype.type(value)
    info: np.iinfo = np.iinfo(dtype)
    low: int = int(info.min)
    span: int = int(info.max) - low + 1
    return dtype.type((int(value) - low) % span + low)  # type: ignore[call-overload]
