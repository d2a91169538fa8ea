################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Construction tags shared by vectors and matrices."""

from __future__ import annotations

from typing import Final


class UninitializeTag:
    """Tag requesting construction without zero-fill.

    Passing ``UNINITIALIZED`` to a vector or matrix constructor allocates the
    buffer without writing it. The caller must fill every element before
    reading any of them.
    """

    _instance: UninitializeTag | None = None

    def __new__(cls) -> UninitializeTag:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNINITIALIZED"


UNINITIALIZED: Final[UninitializeTag] = UninitializeTag()
