################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Dict
from typing import Tuple
from typing import Type

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray

from oasis_math import algebra
from oasis_math.config import get_config
from oasis_math.errors import InitializerError
from oasis_math.errors import ShapeError
from oasis_math.errors import SingularMatrixError
from oasis_math.initializer import Initializer
from oasis_math.rotation import make_free_rotation
from oasis_math.scalar import as_dimension
from oasis_math.scalar import check_index
from oasis_math.scalar import is_scalar
from oasis_math.scalar import resolve_dtype
from oasis_math.scalar import to_scalar
from oasis_math.storage_layout import StorageLayout
from oasis_math.tags import UNINITIALIZED
from oasis_math.vector import VectorBase


# Specialized matrix types keyed by (dtype, rows, columns, layout)
_SPECIALIZATIONS: Dict[Tuple[np.dtype, int, int, StorageLayout], type] = {}


class Matrix:
    """Fixed-size Rows x Cols matrix over a numpy scalar type.

    Responsibility:
        Value-type matrix with element-wise and matrix arithmetic,
        transposition and hooks into the algebra routines for determinant,
        inverse and rotation.

    Specialization:
        ``Matrix[T, Rows, Cols]`` or ``Matrix[T, Rows, Cols, layout]``
        returns a cached subclass with the class constants ``rows``,
        ``columns``, ``elements``, ``dtype`` and ``layout``. Without an
        explicit layout the configured default is used.

    Indexing:
        - ``m[row, col]`` addresses a logical element. The result is the
          same for every storage layout.
        - ``m[i]`` addresses physical slot i of the backing buffer, whose
          meaning depends on the layout.

    Construction:
        - ``M()``: zero matrix, or indeterminate when auto-init is disabled
        - ``M(v0, ..., vN)``: exactly Rows*Cols values in row-major order
        - ``M(other)``: converting copy of a matrix with the same shape
        - ``M(UNINITIALIZED)``: no zero-fill, caller writes before reading

    Errors:
        - ShapeError for mismatched dimensions and for square-only
          operations on non-square matrices
        - BoundsError for out-of-range indices while bounds checks are on
        - TypeError for operands with a different scalar type
    """

    __slots__ = ("_m",)

    # Defer numpy binary operators to the reflected methods below
    __array_ufunc__ = None

    __hash__ = None  # type: ignore[assignment]

    rows: ClassVar[int]
    columns: ClassVar[int]
    elements: ClassVar[int]
    dtype: ClassVar[np.dtype]
    layout: ClassVar[StorageLayout]

    def __class_getitem__(cls, params: Any) -> Type[Matrix]:
        if cls is not Matrix:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple) or len(params) not in (3, 4):
            raise TypeError("Matrix takes [T, Rows, Cols] or [T, Rows, Cols, layout]")
        layout: StorageLayout = (
            StorageLayout.parse(params[3])
            if len(params) == 4
            else get_config().storage_layout
        )
        return matrix_type(params[0], params[1], params[2], layout)

    def __init__(self, *values: Any) -> None:
        cls: Type[Matrix] = type(self)
        if cls is Matrix:
            raise TypeError(
                "Matrix must be specialized, e.g. Matrix[np.float32, 3, 3]"
            )

        self._m: NDArray
        if not values:
            if get_config().auto_init:
                self._m = np.zeros(cls.elements, dtype=cls.dtype)
            else:
                self._m = np.empty(cls.elements, dtype=cls.dtype)
        elif len(values) == 1 and values[0] is UNINITIALIZED:
            self._m = np.empty(cls.elements, dtype=cls.dtype)
        elif len(values) == 1 and isinstance(values[0], Matrix):
            source: Matrix = values[0]
            source._check_same_shape(cls, "copy")
            self._m = np.empty(cls.elements, dtype=cls.dtype)
            self.assign(source._logical())
        elif len(values) == cls.elements:
            if not all(is_scalar(value) for value in values):
                raise InitializerError("matrix values must be scalars")
            logical: NDArray = np.array(values, dtype=cls.dtype).reshape(
                (cls.rows, cls.columns)
            )
            self._m = cls.layout.flatten(logical)
        else:
            raise InitializerError(
                f"{cls.__name__} takes {cls.elements} values, got {len(values)}"
            )

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Return a matrix holding a logical (rows, cols) array-like."""
        result: Matrix = cls(UNINITIALIZED)
        result.assign(array)
        return result

    @classmethod
    def identity(cls) -> Matrix:
        """Return the identity matrix. Square matrices only."""
        result: Matrix = cls(UNINITIALIZED)
        result.load_identity()
        return result

    @classmethod
    def transposed_type(cls) -> Type[Matrix]:
        """Return the Cols x Rows matrix type produced by transposed()."""
        return matrix_type(cls.dtype, cls.columns, cls.rows, cls.layout)

    # Element access

    def __getitem__(self, index: Any) -> Any:
        return self._m[self._offset(index)]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._m[self._offset(index)] = value

    def ptr(self) -> NDArray:
        """Return the live 1-D buffer backing this matrix.

        Elements appear in physical order, so interpreting the buffer requires
        knowing ``layout``. The buffer aliases the matrix's storage and is only
        valid while the matrix is alive. Writes through it are visible through
        typed access. Mixing such writes with typed access from another
        thread is a data race the matrix does not guard against.
        """
        return self._m

    def to_array(self) -> NDArray:
        """Return a logical (rows, cols) copy of the elements."""
        return np.array(self._logical())

    def assign(self, array: ArrayLike) -> None:
        """Overwrite every element from a logical (rows, cols) array-like."""
        values: NDArray = np.asarray(array)
        if values.shape != (self.rows, self.columns):
            raise ShapeError(
                f"expected shape ({self.rows}, {self.columns}), got {values.shape}"
            )
        np.copyto(self._logical(), values, casting="unsafe")

    def copy(self) -> Matrix:
        """Return an independent copy."""
        return type(self)(self)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def initializer(self) -> Initializer:
        """Return an Initializer that fills this matrix in row-major order."""
        return Initializer(self)

    def __lshift__(self, value: Any) -> Initializer:
        return Initializer(self).feed(value)

    # Structural operations

    def reset(self) -> None:
        """Set every element to zero."""
        self._m.fill(0)

    def load_identity(self) -> None:
        """Set the diagonal to one and every other element to zero."""
        self._assert_square("load_identity")
        self._m.fill(0)
        for i in range(self.rows):
            self._m[self.layout.offset(i, i, self.rows, self.columns)] = 1

    def transposed(self) -> Matrix:
        """Return the Cols x Rows transpose without modifying this matrix."""
        result: Matrix = self.transposed_type()(UNINITIALIZED)
        np.copyto(result._logical(), self._logical().T)
        return result

    def transpose(self) -> None:
        """Transpose this matrix in place. Square matrices only."""
        self._assert_square("transpose")
        size: int = self.rows
        for i in range(size - 1):
            for j in range(i + 1, size):
                upper: int = self.layout.offset(i, j, size, size)
                lower: int = self.layout.offset(j, i, size, size)
                self._m[upper], self._m[lower] = self._m[lower], self._m[upper]

    def trace(self) -> Any:
        """Return M(0, 0) + M(1, 1) + ... + M(N - 1, N - 1)."""
        self._assert_square("trace")
        total: Any = self.dtype.type(0)
        for i in range(self.rows):
            total += self._m[self.layout.offset(i, i, self.rows, self.columns)]
        return self.dtype.type(total)

    def determinant(self) -> Any:
        """Return the determinant as the matrix scalar type. Square matrices only."""
        self._assert_square("determinant")
        return algebra.determinant(self)

    def inverse(self) -> Matrix:
        """Return the inverse, raising SingularMatrixError if there is none."""
        result: Matrix = self.copy()
        if not result.make_inverse():
            raise SingularMatrixError("matrix is singular")
        return result

    def make_inverse(self) -> bool:
        """Invert this matrix in place.

        Returns False when the matrix is singular. The contents are then
        unspecified.
        """
        self._assert_square("make_inverse")
        source: Matrix = self.copy()
        return algebra.inverse(self, source)

    def rotate_free(self, axis: Any, angle: float) -> None:
        """Rotate this matrix by angle radians around a unit axis.

        The rotation is applied after the current transform, i.e. this matrix
        becomes ``self * R``.
        """
        self._assert_square("rotate_free")
        rotation: Matrix = type(self).identity()
        make_free_rotation(rotation, axis, angle)
        self *= rotation

    # Arithmetic

    def __iadd__(self, rhs: Matrix) -> Matrix:
        self._check_operand(rhs, "+=")
        logical: NDArray = self._logical()
        logical += rhs._logical()
        return self

    def __isub__(self, rhs: Matrix) -> Matrix:
        self._check_operand(rhs, "-=")
        logical: NDArray = self._logical()
        logical -= rhs._logical()
        return self

    def __imul__(self, rhs: Any) -> Matrix:
        if is_scalar(rhs):
            self._m *= to_scalar(self.dtype, rhs)
            return self
        if isinstance(rhs, Matrix):
            self._assert_square("*=")
            self._check_operand(rhs, "*=")
            self.assign(_multiply(self, rhs)._logical())
            return self
        raise TypeError("*= requires a matrix or scalar operand")

    def __add__(self, rhs: Any) -> Any:
        if not isinstance(rhs, Matrix):
            return NotImplemented
        result: Matrix = self.copy()
        result += rhs
        return result

    def __sub__(self, rhs: Any) -> Any:
        if not isinstance(rhs, Matrix):
            return NotImplemented
        result: Matrix = self.copy()
        result -= rhs
        return result

    def __mul__(self, rhs: Any) -> Any:
        if isinstance(rhs, Matrix):
            return _multiply(self, rhs)
        if isinstance(rhs, VectorBase):
            return _transform(self, rhs)
        if is_scalar(rhs):
            result: Matrix = self.copy()
            result *= rhs
            return result
        return NotImplemented

    def __rmul__(self, lhs: Any) -> Any:
        if not is_scalar(lhs):
            return NotImplemented
        result: Matrix = self.copy()
        result *= lhs
        return result

    def __matmul__(self, rhs: Any) -> Any:
        if isinstance(rhs, Matrix):
            return _multiply(self, rhs)
        if isinstance(rhs, VectorBase):
            return _transform(self, rhs)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if (other.rows, other.columns) != (self.rows, self.columns):
            return False
        return bool(np.array_equal(self._logical(), other._logical()))

    def allclose(self, other: Matrix, rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        """Return True when every element matches other within tolerance."""
        if not isinstance(other, Matrix):
            raise TypeError("allclose requires a matrix operand")
        if (other.rows, other.columns) != (self.rows, self.columns):
            return False
        return bool(
            np.allclose(self._logical(), other._logical(), rtol=rtol, atol=atol)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._logical().tolist()!r})"

    # Internals

    def _logical(self) -> NDArray:
        return self.layout.logical_view(self._m, self.rows, self.columns)

    def _offset(self, index: Any) -> int:
        if isinstance(index, tuple):
            if len(index) != 2:
                raise TypeError("matrix indices must be (row, col) or a linear index")
            row: int = check_index(index[0], self.rows, "row")
            col: int = check_index(index[1], self.columns, "column")
            return self.layout.offset(row, col, self.rows, self.columns)
        return check_index(index, self.elements, "element")

    def _assert_square(self, name: str) -> None:
        if self.rows != self.columns:
            raise ShapeError(f"{name} can only be used with NxN matrices")

    def _check_same_shape(self, other: Any, op: str) -> None:
        if (other.rows, other.columns) != (self.rows, self.columns):
            raise ShapeError(
                f"{op} requires matching shapes, got {self.rows}x{self.columns} "
                f"and {other.rows}x{other.columns}"
            )

    def _check_operand(self, rhs: Any, op: str) -> None:
        if not isinstance(rhs, Matrix):
            raise TypeError(f"{op} requires a matrix operand")
        self._check_same_shape(rhs, op)
        _check_dtype(self, rhs, op)


class MatrixFamily:
    """Generic alias for one matrix shape, specialized with ``family[T]``."""

    __slots__ = ("rows", "columns")

    def __init__(self, rows: int, columns: int) -> None:
        self.rows: int = as_dimension(rows, "rows")
        self.columns: int = as_dimension(columns, "columns")

    def __getitem__(self, scalar_type: object) -> Type[Matrix]:
        return Matrix[scalar_type, self.rows, self.columns]

    def __repr__(self) -> str:
        return f"MatrixFamily({self.rows}, {self.columns})"


def matrix_type(
    scalar_type: object,
    rows: int,
    columns: int,
    layout: StorageLayout | str | None = None,
) -> Type[Matrix]:
    """Return the specialized matrix type for a scalar type and shape."""
    dtype: np.dtype = resolve_dtype(scalar_type)
    row_count: int = as_dimension(rows, "rows")
    column_count: int = as_dimension(columns, "columns")
    storage: StorageLayout = (
        get_config().storage_layout if layout is None else StorageLayout.parse(layout)
    )

    key: Tuple[np.dtype, int, int, StorageLayout] = (
        dtype,
        row_count,
        column_count,
        storage,
    )
    specialized: type | None = _SPECIALIZATIONS.get(key)
    if specialized is None:
        name: str = f"Matrix[{dtype.name}, {row_count}, {column_count}]"
        specialized = type(
            name,
            (Matrix,),
            {
                "__slots__": (),
                "__qualname__": name,
                "__module__": Matrix.__module__,
                "rows": row_count,
                "columns": column_count,
                "elements": row_count * column_count,
                "dtype": dtype,
                "layout": storage,
            },
        )
        _SPECIALIZATIONS[key] = specialized
    return specialized


def _check_dtype(lhs: Any, rhs: Any, op: str) -> None:
    if lhs.dtype != rhs.dtype:
        raise TypeError(
            f"{op} requires matching scalar types, got "
            f"{lhs.dtype.name} and {rhs.dtype.name}"
        )


def _multiply(lhs: Matrix, rhs: Matrix) -> Matrix:
    """Return lhs * rhs for an R x K and a K x C matrix."""
    if lhs.columns != rhs.rows:
        raise ShapeError(
            f"cannot multiply {lhs.rows}x{lhs.columns} by {rhs.rows}x{rhs.columns}"
        )
    _check_dtype(lhs, rhs, "*")

    result: Matrix = matrix_type(lhs.dtype, lhs.rows, rhs.columns, lhs.layout)(
        UNINITIALIZED
    )
    a: NDArray = lhs._logical()
    b: NDArray = rhs._logical()
    out: NDArray = result._logical()
    for r in range(lhs.rows):
        for c in range(rhs.columns):
            acc: Any = lhs.dtype.type(0)
            for i in range(lhs.columns):
                acc += a[r, i] * b[i, c]
            out[r, c] = acc
    return result


def _transform(matrix: Matrix, vector: VectorBase) -> VectorBase:
    """Return matrix * vector, treating the vector as a column."""
    if matrix.rows != matrix.columns or matrix.columns != vector.components:
        raise ShapeError(
            f"cannot transform a {vector.components}-component vector by a "
            f"{matrix.rows}x{matrix.columns} matrix"
        )
    _check_dtype(matrix, vector, "*")
    result: VectorBase = type(vector)(UNINITIALIZED)
    np.copyto(result.ptr(), matrix._logical() @ vector.ptr(), casting="unsafe")
    return result
