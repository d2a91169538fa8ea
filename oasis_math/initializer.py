################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Sequential element initialization for matrices."""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING
from typing import Iterable

from oasis_math.errors import InitializerError
from oasis_math.scalar import is_scalar


if TYPE_CHECKING:
    from oasis_math.matrix import Matrix


class Initializer:
    """Streams scalars into consecutive logical slots of one matrix.

    Values are written in row-major logical order, slot ``k`` going to
    ``(k // columns, k % columns)``, whatever the storage layout of the
    matrix. Usually started from the matrix itself:

        m << 1 << 2 << 3 << 4
        m << (1, 2, 3, 4)

        with m.initializer() as init:
            init << 1 << 2 << 3 << 4

    Feeding more values than the matrix holds raises InitializerError
    immediately. Feeding fewer leaves the trailing elements untouched;
    ``done()`` and the context-manager exit reject an incomplete fill.
    """

    __slots__ = ("_matrix", "_element")

    def __init__(self, matrix: Matrix) -> None:
        self._matrix: Matrix = matrix
        self._element: int = 0

    @property
    def matrix(self) -> Matrix:
        """Return the matrix being filled."""
        return self._matrix

    @property
    def count(self) -> int:
        """Return the number of values fed so far."""
        return self._element

    @property
    def complete(self) -> bool:
        """Return True once every element has been written."""
        return self._element == self._matrix.elements

    def feed(self, value: object) -> Initializer:
        """Write the next value, or each value of an iterable, and advance."""
        if is_scalar(value):
            self._write(value)
        elif isinstance(value, Iterable):
            for item in value:
                if not is_scalar(item):
                    raise InitializerError("initializer values must be scalars")
                self._write(item)
        else:
            raise InitializerError("initializer values must be scalars")
        return self

    def done(self) -> Matrix:
        """Check that exactly every element was written and return the matrix."""
        if not self.complete:
            raise InitializerError(
                f"initializer received {self._element} of "
                f"{self._matrix.elements} values"
            )
        return self._matrix

    def __lshift__(self, value: object) -> Initializer:
        return self.feed(value)

    def __enter__(self) -> Initializer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.done()

    def _write(self, value: object) -> None:
        columns: int = self._matrix.columns
        if self._element >= self._matrix.elements:
            raise InitializerError(
                f"initializer overflow, matrix holds {self._matrix.elements} values"
            )
        self._matrix[self._element // columns, self._element % columns] = value
        self._element += 1
