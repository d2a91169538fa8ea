################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Multi-component vector accessors such as ``v.xy`` and ``v.zyx``."""

from __future__ import annotations

from typing import Optional
from typing import Tuple


# Swizzles produce vectors, so their length is limited to the vector arities
MIN_SWIZZLE_LENGTH: int = 2
MAX_SWIZZLE_LENGTH: int = 4


def swizzle_indices(fields: str, pattern: str) -> Optional[Tuple[int, ...]]:
    """Return the component indices named by pattern, or None.

    Args:
        fields: component names of the source vector in index order, e.g. "xyz"
        pattern: requested accessor, e.g. "zyx" or "xxyy"
    """
    if not MIN_SWIZZLE_LENGTH <= len(pattern) <= MAX_SWIZZLE_LENGTH:
        return None
    indices: list[int] = []
    for name in pattern:
        index: int = fields.find(name)
        if index < 0:
            return None
        indices.append(index)
    return tuple(indices)
