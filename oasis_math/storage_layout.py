################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Physical storage layouts for fixed-size matrices."""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import NDArray


class StorageLayout(Enum):
    """Mapping from a logical (row, col) address to a 1-D buffer offset.

    The layout only decides where an element lives in memory. Every public
    matrix operation addresses elements logically, so two matrices with the
    same logical contents compare equal regardless of layout. The layout
    matters to consumers of the raw buffer, e.g. graphics APIs expecting
    column-major uniforms.
    """

    ROW_MAJOR = "row_major"
    COLUMN_MAJOR = "column_major"

    @property
    def numpy_order(self) -> str:
        """Return the numpy memory order matching this layout."""
        return "C" if self is StorageLayout.ROW_MAJOR else "F"

    def offset(self, row: int, col: int, rows: int, cols: int) -> int:
        """Return the buffer offset of logical element (row, col)."""
        if self is StorageLayout.ROW_MAJOR:
            return row * cols + col
        return col * rows + row

    def logical_view(
        self, buffer: NDArray, rows: int, cols: int
    ) -> NDArray:
        """Return a (rows, cols) view of a 1-D buffer sharing its memory."""
        return buffer.reshape((rows, cols), order=self.numpy_order)

    def flatten(self, matrix: NDArray) -> NDArray:
        """Return a new 1-D buffer holding a logical 2-D array in this layout."""
        return np.array(matrix).ravel(order=self.numpy_order)

    @staticmethod
    def parse(value: StorageLayout | str) -> StorageLayout:
        """Return the layout named by value."""
        if isinstance(value, StorageLayout):
            return value
        if not isinstance(value, str):
            raise ValueError("storage_layout must be a string or StorageLayout")
        normalized: str = value.strip().lower().replace("-", "_")
        for layout in StorageLayout:
            if layout.value == normalized:
                return layout
        raise ValueError(f"unknown storage layout: {value}")
