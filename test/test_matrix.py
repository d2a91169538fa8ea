################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the matrix value type."""

from __future__ import annotations

import copy
import unittest

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_math.config import override
from oasis_math.errors import BoundsError
from oasis_math.errors import InitializerError
from oasis_math.errors import ShapeError
from oasis_math.matrix import Matrix
from oasis_math.matrix import MatrixFamily
from oasis_math.matrix import matrix_type
from oasis_math.storage_layout import StorageLayout
from oasis_math.tags import UNINITIALIZED


class TestMatrixConstruction(unittest.TestCase):
    """Tests for matrix specialization and construction."""

    def test_class_constants(self) -> None:
        """Specialized types expose their shape and scalar type."""
        m_type: type = Matrix[np.float32, 2, 3]
        self.assertEqual(m_type.rows, 2)
        self.assertEqual(m_type.columns, 3)
        self.assertEqual(m_type.elements, 6)
        self.assertEqual(m_type.dtype, np.dtype(np.float32))

    def test_specializations_are_cached(self) -> None:
        """The same arguments return the same type."""
        self.assertIs(Matrix[np.float64, 4, 4], Matrix[np.float64, 4, 4])
        self.assertIs(Matrix[float, 4, 4], Matrix[np.float64, 4, 4])
        self.assertIs(matrix_type(np.int32, 2, 2), Matrix[np.int32, 2, 2])

    def test_invalid_specializations(self) -> None:
        """Empty shapes and non-arithmetic scalars are rejected."""
        with self.assertRaises(ShapeError):
            Matrix[np.float32, 0, 3]
        with self.assertRaises(ShapeError):
            Matrix[np.float32, 2, 2.5]
        with self.assertRaises(TypeError):
            Matrix[str, 2, 2]
        with self.assertRaises(TypeError):
            Matrix[np.float32, 2]
        with self.assertRaises(TypeError):
            Matrix[np.float32, 2, 2][np.float32, 2, 2]

    def test_unspecialized_construction_fails(self) -> None:
        """The generic Matrix cannot be instantiated."""
        with self.assertRaises(TypeError):
            Matrix()

    def test_default_is_zero(self) -> None:
        """Default construction zero-fills."""
        m: Matrix = Matrix[np.float64, 3, 4]()
        self.assertTrue(np.all(m.ptr() == 0.0))

    def test_values_in_row_major_order(self) -> None:
        """Value construction takes rows first."""
        m: Matrix = Matrix[np.int32, 2, 3](1, 2, 3, 4, 5, 6)
        self.assertEqual(m.to_array().tolist(), [[1, 2, 3], [4, 5, 6]])

    def test_wrong_value_count(self) -> None:
        """Value construction requires exactly Rows*Cols values."""
        with self.assertRaises(InitializerError):
            Matrix[np.int32, 2, 2](1, 2, 3)
        with self.assertRaises(InitializerError):
            Matrix[np.int32, 2, 2](1, 2, 3, 4, 5)
        with self.assertRaises(InitializerError):
            Matrix[np.int32, 1, 2]("a", "b")

    def test_uninitialized_allocates(self) -> None:
        """UNINITIALIZED allocates a buffer of the right size."""
        m: Matrix = Matrix[np.float32, 4, 4](UNINITIALIZED)
        self.assertEqual(m.ptr().shape, (16,))
        self.assertEqual(m.ptr().dtype, np.dtype(np.float32))

    def test_auto_init_disabled(self) -> None:
        """Default construction still allocates with auto-init off."""
        with override(auto_init=False):
            m: Matrix = Matrix[np.float32, 2, 2]()
        self.assertEqual(m.ptr().shape, (4,))
        m.reset()
        self.assertTrue(np.all(m.ptr() == 0.0))

    def test_copy_is_independent(self) -> None:
        """Copies do not alias the source."""
        m: Matrix = Matrix[np.float64, 2, 2](1.0, 2.0, 3.0, 4.0)
        copies: list = [
            Matrix[np.float64, 2, 2](m),
            m.copy(),
            copy.copy(m),
            copy.deepcopy(m),
        ]
        for other in copies:
            self.assertEqual(other, m)
            other[0, 0] = 9.0
            self.assertEqual(m[0, 0], 1.0)

    def test_converting_copy(self) -> None:
        """Copy construction converts between scalar types and layouts."""
        source: Matrix = Matrix[np.float64, 2, 2, "row_major"](1.5, 2.5, -3.5, 4.0)
        target: Matrix = Matrix[np.int32, 2, 2, "column_major"](source)
        self.assertEqual(target.to_array().tolist(), [[1, 2], [-3, 4]])
        with self.assertRaises(ShapeError):
            Matrix[np.float64, 3, 3](source)


def test_element_access_and_bounds() -> None:
    """Checks logical and linear access with bounds checks."""
    m: Matrix = Matrix[np.int32, 2, 3](1, 2, 3, 4, 5, 6)
    assert m[1, 2] == 6
    m[1, 2] = 60
    assert m[1, 2] == 60
    with override(bounds_checks=True):
        with pytest.raises(BoundsError):
            m[2, 0]
        with pytest.raises(BoundsError):
            m[0, 3]
        with pytest.raises(BoundsError):
            m[6]
        with pytest.raises(BoundsError):
            m[-1]
        with pytest.raises(BoundsError):
            m[0, 3] = 1
    with pytest.raises(TypeError):
        m[0, 0, 0]
    assert issubclass(BoundsError, IndexError)


def test_bounds_checks_disabled() -> None:
    """Checks in-range access is unaffected when checks are off."""
    m: Matrix = Matrix[np.int32, 2, 2](1, 2, 3, 4)
    with override(bounds_checks=False):
        assert m[1, 0] == 3
        m[0, 1] = 20
    assert m[0, 1] == 20


def test_reset_and_identity() -> None:
    """Checks reset zeroes and identity sets the diagonal."""
    m: Matrix = Matrix[np.float32, 3, 3](1, 2, 3, 4, 5, 6, 7, 8, 9)
    m.reset()
    assert np.all(m.to_array() == 0.0)
    m.load_identity()
    assert np.array_equal(m.to_array(), np.eye(3, dtype=np.float32))
    assert Matrix[np.int32, 4, 4].identity() == Matrix[np.int32, 4, 4].from_array(
        np.eye(4, dtype=np.int32)
    )


def test_identity_requires_square() -> None:
    """Checks identity is rejected for non-square matrices."""
    with pytest.raises(ShapeError):
        Matrix[np.float32, 3, 4].identity()
    with pytest.raises(ShapeError):
        Matrix[np.float32, 3, 4]().load_identity()


@pytest.mark.parametrize("layout", list(StorageLayout))
def test_transposed_non_square(layout: StorageLayout) -> None:
    """Checks transposing [[1,2,3],[4,5,6]] yields [[1,4],[2,5],[3,6]]."""
    m: Matrix = Matrix[np.int32, 2, 3, layout](1, 2, 3, 4, 5, 6)
    t: Matrix = m.transposed()
    assert type(t) is Matrix[np.int32, 3, 2, layout]
    assert type(t) is m.transposed_type()
    assert t.to_array().tolist() == [[1, 4], [2, 5], [3, 6]]
    assert m.to_array().tolist() == [[1, 2, 3], [4, 5, 6]]


@pytest.mark.parametrize("layout", list(StorageLayout))
def test_transpose_in_place_matches_transposed(
    layout: StorageLayout, rng: np.random.Generator
) -> None:
    """Checks in-place transpose matches the out-of-place result."""
    for size in (1, 2, 3, 4):
        values: NDArray[np.float64] = rng.standard_normal((size, size))
        m: Matrix = Matrix[np.float64, size, size, layout].from_array(values)
        expected: Matrix = m.transposed()
        m.transpose()
        assert m == expected
        assert np.array_equal(m.to_array(), values.T)


def test_transpose_requires_square() -> None:
    """Checks in-place transpose is rejected for non-square matrices."""
    with pytest.raises(ShapeError):
        Matrix[np.float32, 2, 3]().transpose()


def test_double_transpose(rng: np.random.Generator) -> None:
    """Checks transposing twice restores the matrix exactly."""
    values: NDArray[np.float64] = rng.standard_normal((3, 4))
    m: Matrix = Matrix[np.float64, 3, 4].from_array(values)
    assert m.transposed().transposed() == m


def test_trace() -> None:
    """Checks the trace sums the diagonal."""
    m: Matrix = Matrix[np.int32, 3, 3](1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m.trace() == 15
    assert isinstance(m.trace(), np.int32)
    with pytest.raises(ShapeError):
        Matrix[np.int32, 2, 3]().trace()


def test_array_round_trip() -> None:
    """Checks from_array, to_array and assign."""
    values: list[list[float]] = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    m: Matrix = Matrix[np.float64, 3, 2].from_array(values)
    assert m.to_array().tolist() == values
    result: NDArray[np.float64] = m.to_array()
    result[0, 0] = 100.0
    assert m[0, 0] == 1.0
    with pytest.raises(ShapeError):
        m.assign([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_ptr_aliases_storage() -> None:
    """Checks writes through ptr() are visible through typed access."""
    m: Matrix = Matrix[np.float32, 2, 2, "column_major"]()
    buffer: NDArray[np.float32] = m.ptr()
    buffer[2] = 5.0
    assert m[0, 1] == 5.0
    m[1, 0] = 3.0
    assert buffer[1] == 3.0


def test_equality_and_hash() -> None:
    """Checks equality compares logical contents and matrices are unhashable."""
    a: Matrix = Matrix[np.float32, 2, 2](1, 2, 3, 4)
    b: Matrix = Matrix[np.float32, 2, 2](1, 2, 3, 4)
    assert a == b
    b[1, 1] = 4.5
    assert a != b
    assert a != Matrix[np.float32, 1, 4](1, 2, 3, 4)
    assert a.allclose(Matrix[np.float32, 2, 2](1, 2, 3, 4.000001))
    assert not a.allclose(Matrix[np.float32, 4, 1](1, 2, 3, 4))
    with pytest.raises(TypeError):
        hash(a)


def test_repr() -> None:
    """Checks the representation names the type and values."""
    m: Matrix = Matrix[np.int32, 2, 2](1, 2, 3, 4)
    assert repr(m) == "Matrix[int32, 2, 2]([[1, 2], [3, 4]])"


def test_matrix_family() -> None:
    """Checks generic families specialize on the scalar type."""
    family: MatrixFamily = MatrixFamily(3, 4)
    assert family[np.float64] is Matrix[np.float64, 3, 4]
    with pytest.raises(ShapeError):
        MatrixFamily(0, 4)
