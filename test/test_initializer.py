################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for sequential matrix initialization."""

from __future__ import annotations

import numpy as np
import pytest

from oasis_math.errors import InitializerError
from oasis_math.initializer import Initializer
from oasis_math.matrix import Matrix
from oasis_math.storage_layout import StorageLayout


@pytest.mark.parametrize("layout", list(StorageLayout))
def test_chain_fills_row_major_logical_order(layout: StorageLayout) -> None:
    """Checks m << 1 << 2 << 3 << 4 fills rows first under every layout."""
    m: Matrix = Matrix[np.int32, 2, 2, layout]()
    m << 1 << 2 << 3 << 4
    assert m[0, 0] == 1
    assert m[0, 1] == 2
    assert m[1, 0] == 3
    assert m[1, 1] == 4


@pytest.mark.parametrize("layout", list(StorageLayout))
def test_iterable_feed(layout: StorageLayout) -> None:
    """Checks an iterable is fed value by value."""
    m: Matrix = Matrix[np.float64, 2, 3, layout]()
    init: Initializer = m << (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert init.complete
    assert init.done() is m
    assert m.to_array().tolist() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def test_mixed_scalars_and_iterables() -> None:
    """Checks scalars and iterables can be chained together."""
    m: Matrix = Matrix[np.int32, 2, 2]()
    m << 1 << [2, 3] << np.int32(4)
    assert m.to_array().tolist() == [[1, 2], [3, 4]]


def test_values_are_converted_to_the_scalar_type() -> None:
    """Checks fed values are stored as the matrix scalar type."""
    m: Matrix = Matrix[np.int32, 1, 2]()
    m << 1.75 << -2.5
    assert m.to_array().tolist() == [[1, -2]]


def test_overflow_raises() -> None:
    """Checks feeding past the last element is rejected."""
    m: Matrix = Matrix[np.int32, 2, 2]()
    init: Initializer = m << (1, 2, 3, 4)
    with pytest.raises(InitializerError):
        init << 5
    assert m.to_array().tolist() == [[1, 2], [3, 4]]


def test_underfill_keeps_trailing_values() -> None:
    """Checks trailing elements keep their prior values."""
    m: Matrix = Matrix[np.int32, 2, 2](9, 9, 9, 9)
    init: Initializer = m << 1 << 2
    assert init.count == 2
    assert not init.complete
    assert m.to_array().tolist() == [[1, 2], [9, 9]]
    with pytest.raises(InitializerError):
        init.done()


def test_context_manager_checks_count() -> None:
    """Checks the context manager rejects an incomplete fill."""
    m: Matrix = Matrix[np.float32, 2, 2]()
    with m.initializer() as init:
        init << 1.0 << 0.0 << 0.0 << 1.0
    assert m == Matrix[np.float32, 2, 2].identity()

    with pytest.raises(InitializerError):
        with m.initializer() as init:
            init << 1.0


def test_non_scalar_values_rejected() -> None:
    """Checks non-numeric values are rejected."""
    m: Matrix = Matrix[np.float32, 2, 2]()
    with pytest.raises(InitializerError):
        m << "1"
    with pytest.raises(InitializerError):
        m << [[1.0, 2.0], [3.0, 4.0]]
    with pytest.raises(InitializerError):
        m << object()


def test_each_initializer_starts_at_zero() -> None:
    """Checks a new chain starts again at the first element."""
    m: Matrix = Matrix[np.int32, 1, 3]()
    m << 1 << 2 << 3
    m << 7
    assert m.to_array().tolist() == [[7, 2, 3]]
