################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Fixed-size vectors with named components."""

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Dict
from typing import Iterator
from typing import Tuple
from typing import Type

import numpy as np
from numpy.typing import NDArray

from oasis_math import algebra
from oasis_math.config import get_config
from oasis_math.errors import InitializerError
from oasis_math.errors import ShapeError
from oasis_math.scalar import check_index
from oasis_math.scalar import is_scalar
from oasis_math.scalar import resolve_dtype
from oasis_math.scalar import to_scalar
from oasis_math.swizzle import swizzle_indices
from oasis_math.tags import UNINITIALIZED


# Specialized vector types keyed by (family, dtype)
_SPECIALIZATIONS: Dict[Tuple[type, np.dtype], type] = {}


def _component(index: int, name: str) -> property:
    def getter(self: VectorBase) -> Any:
        return self._v[index]

    def setter(self: VectorBase, value: Any) -> None:
        self._v[index] = value

    return property(getter, setter, doc=f"Component {name} (index {index}).")


class VectorBase:
    """Shared implementation of the 2, 3 and 4 component vectors.

    A vector family such as ``Vector3T`` is specialized on a scalar type
    with ``Vector3T[np.float32]``. Components live in one contiguous numpy
    buffer so ``v[i]`` and the named fields address the same storage.

    Construction:
        - ``V()``: zero vector, or indeterminate when auto-init is disabled
        - ``V(s)``: every component set to s
        - ``V(x, y, ...)``: one value per component
        - ``V(other)``: converting copy of a vector with the same arity
        - ``V(UNINITIALIZED)``: no zero-fill, caller writes before reading
    """

    __slots__ = ("_v",)

    # Defer numpy binary operators to the reflected methods below
    __array_ufunc__ = None

    __hash__ = None  # type: ignore[assignment]

    components: ClassVar[int]
    dtype: ClassVar[np.dtype]
    _FIELDS: ClassVar[str] = ""

    def __class_getitem__(cls, scalar_type: object) -> Type[VectorBase]:
        if "dtype" in cls.__dict__ or cls is VectorBase:
            raise TypeError(f"{cls.__name__} cannot be specialized")
        dtype: np.dtype = resolve_dtype(scalar_type)
        key: Tuple[type, np.dtype] = (cls, dtype)
        specialized: type | None = _SPECIALIZATIONS.get(key)
        if specialized is None:
            name: str = f"{cls.__name__}[{dtype.name}]"
            specialized = type(
                name,
                (cls,),
                {
                    "__slots__": (),
                    "__qualname__": name,
                    "__module__": cls.__module__,
                    "dtype": dtype,
                },
            )
            _SPECIALIZATIONS[key] = specialized
        return specialized

    def __init__(self, *values: Any) -> None:
        cls: Type[VectorBase] = type(self)
        if "dtype" not in cls.__dict__:
            raise TypeError(
                f"{cls.__name__} must be specialized on a scalar type, "
                f"e.g. {cls.__name__}[np.float32]"
            )

        self._v: NDArray
        if not values:
            if get_config().auto_init:
                self._v = np.zeros(cls.components, dtype=cls.dtype)
            else:
                self._v = np.empty(cls.components, dtype=cls.dtype)
        elif len(values) == 1:
            value: Any = values[0]
            if value is UNINITIALIZED:
                self._v = np.empty(cls.components, dtype=cls.dtype)
            elif isinstance(value, VectorBase):
                if value.components != cls.components:
                    raise ShapeError(
                        f"cannot copy a {value.components}-component vector "
                        f"into a {cls.components}-component vector"
                    )
                self._v = value._v.astype(cls.dtype)
            elif is_scalar(value):
                self._v = np.full(cls.components, value, dtype=cls.dtype)
            else:
                raise TypeError(f"cannot construct {cls.__name__} from {value!r}")
        elif len(values) == cls.components:
            self._v = np.array(values, dtype=cls.dtype)
        else:
            raise InitializerError(
                f"{cls.__name__} takes 1 or {cls.components} values, "
                f"got {len(values)}"
            )

    # Element access

    def __getitem__(self, component: int) -> Any:
        return self._v[check_index(component, self.components, "component")]

    def __setitem__(self, component: int, value: Any) -> None:
        self._v[check_index(component, self.components, "component")] = value

    def __len__(self) -> int:
        return self.components

    def __iter__(self) -> Iterator[Any]:
        return iter(self._v)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or not get_config().swizzle:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        indices: Tuple[int, ...] | None = swizzle_indices(self._FIELDS, name)
        if indices is None:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        result_type: Type[VectorBase] = vector_type(len(indices), self.dtype)
        return result_type(*self._v[list(indices)])

    def ptr(self) -> NDArray:
        """Return the live 1-D buffer backing this vector.

        The buffer aliases the vector's storage and is only valid while the
        vector is alive. Writes through it are visible through the named
        fields. Mixing such writes with typed access from another thread is
        a data race the vector does not guard against.
        """
        return self._v

    def copy(self) -> VectorBase:
        """Return an independent copy."""
        return type(self)(self)

    def __copy__(self) -> VectorBase:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> VectorBase:
        return self.copy()

    # Arithmetic

    def __iadd__(self, rhs: VectorBase) -> VectorBase:
        self._check_operand(rhs, "+=")
        self._v[:] = self._v + rhs._v
        return self

    def __isub__(self, rhs: VectorBase) -> VectorBase:
        self._check_operand(rhs, "-=")
        self._v[:] = self._v - rhs._v
        return self

    def __imul__(self, rhs: Any) -> VectorBase:
        if is_scalar(rhs):
            self._v[:] = self._v * to_scalar(self.dtype, rhs)
        else:
            self._check_operand(rhs, "*=")
            self._v[:] = self._v * rhs._v
        return self

    def __itruediv__(self, rhs: Any) -> VectorBase:
        if is_scalar(rhs):
            self._v[:] = self._v / to_scalar(self.dtype, rhs)
        else:
            self._check_operand(rhs, "/=")
            self._v[:] = self._v / rhs._v
        return self

    def __add__(self, rhs: Any) -> Any:
        if not isinstance(rhs, VectorBase):
            return NotImplemented
        result: VectorBase = self.copy()
        result += rhs
        return result

    def __sub__(self, rhs: Any) -> Any:
        if not isinstance(rhs, VectorBase):
            return NotImplemented
        result: VectorBase = self.copy()
        result -= rhs
        return result

    def __mul__(self, rhs: Any) -> Any:
        if not (isinstance(rhs, VectorBase) or is_scalar(rhs)):
            return NotImplemented
        result: VectorBase = self.copy()
        result *= rhs
        return result

    def __rmul__(self, lhs: Any) -> Any:
        if not is_scalar(lhs):
            return NotImplemented
        result: VectorBase = self.copy()
        result *= lhs
        return result

    def __truediv__(self, rhs: Any) -> Any:
        if not (isinstance(rhs, VectorBase) or is_scalar(rhs)):
            return NotImplemented
        result: VectorBase = self.copy()
        result /= rhs
        return result

    def __neg__(self) -> VectorBase:
        result: VectorBase = type(self)(UNINITIALIZED)
        result._v[:] = -self._v
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorBase):
            return NotImplemented
        if other.components != self.components:
            return False
        return bool(np.array_equal(self._v, other._v))

    def allclose(
        self, other: VectorBase, rtol: float = 1e-5, atol: float = 1e-8
    ) -> bool:
        """Return True when every component matches other within tolerance."""
        if not isinstance(other, VectorBase):
            raise TypeError("allclose requires a vector operand")
        if other.components != self.components:
            return False
        return bool(np.allclose(self._v, other._v, rtol=rtol, atol=atol))

    # Algebra

    def length_sq(self) -> Any:
        """Return the squared length of this vector."""
        return algebra.length_sq(self)

    def length(self) -> Any:
        """Return the length of this vector."""
        return algebra.length(self)

    def normalize(self) -> None:
        """Normalize this vector to unit length in place."""
        algebra.normalize(self)

    def normalized(self) -> VectorBase:
        """Return a normalized copy of this vector."""
        result: VectorBase = self.copy()
        result.normalize()
        return result

    def resize(self, length: float) -> None:
        """Scale this vector in place to the given length."""
        algebra.resize(self, length)

    def dot(self, other: VectorBase) -> Any:
        return algebra.dot(self, other)

    def cast(self, scalar_type: object) -> VectorBase:
        """Return a copy with every component converted to scalar_type."""
        return vector_type(self.components, resolve_dtype(scalar_type))(self)

    def __repr__(self) -> str:
        values: str = ", ".join(repr(value) for value in self._v.tolist())
        return f"{type(self).__name__}({values})"

    def _check_operand(self, rhs: Any, op: str) -> None:
        if not isinstance(rhs, VectorBase):
            raise TypeError(f"{op} requires a vector or scalar operand")
        if rhs.components != self.components:
            raise ShapeError(
                f"{op} requires vectors with the same number of components"
            )
        if rhs.dtype != self.dtype:
            raise TypeError(
                f"{op} requires matching scalar types, got "
                f"{self.dtype.name} and {rhs.dtype.name}"
            )


class Vector2T(VectorBase):
    """2D vector with components x and y."""

    __slots__ = ()

    components: ClassVar[int] = 2
    _FIELDS: ClassVar[str] = "xy"

    x = _component(0, "x")
    y = _component(1, "y")


class Vector3T(VectorBase):
    """3D vector with components x, y and z."""

    __slots__ = ()

    components: ClassVar[int] = 3
    _FIELDS: ClassVar[str] = "xyz"

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")

    def cross(self, other: Vector3T) -> Vector3T:
        """Return the cross product self × other."""
        return algebra.cross(self, other)


class Vector4T(VectorBase):
    """4D vector with components x, y, z and w."""

    __slots__ = ()

    components: ClassVar[int] = 4
    _FIELDS: ClassVar[str] = "xyzw"

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")
    w = _component(3, "w")


_FAMILIES: Dict[int, Type[VectorBase]] = {
    2: Vector2T,
    3: Vector3T,
    4: Vector4T,
}


def vector_type(components: int, scalar_type: object) -> Type[VectorBase]:
    """Return the vector type with the given arity and scalar type."""
    family: Type[VectorBase] | None = _FAMILIES.get(components)
    if family is None:
        raise ShapeError(f"no vector type with {components} components")
    return family[scalar_type]  # type: ignore[index]
