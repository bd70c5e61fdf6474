from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from .errors import (
    DimensionMismatchError,
    InvalidIndexError,
    UnsupportedOperationError,
)
from .modular import inverse_by_scan, normalize


class Matrix(ABC):
    """
    Shared interface of the row vector and the 2x2 key matrix.

    Not every operation is legal on both shapes: a vector has no determinant
    and a key is never multiplied by anything, so those calls raise
    UnsupportedOperationError.
    """

    @abstractmethod
    def multiply(self, other: "Matrix") -> "Matrix":
        ...

    @abstractmethod
    def reduce_modulo(self, m: int) -> None:
        ...

    @abstractmethod
    def get(self, row: int, col: int) -> int:
        ...

    @abstractmethod
    def set(self, row: int, col: int, value: int) -> None:
        ...

    @abstractmethod
    def width(self) -> int:
        ...

    @abstractmethod
    def height(self) -> int:
        ...

    def determinant(self) -> int:
        raise UnsupportedOperationError(f"{type(self).__name__} has no determinant.")

    def determinant_inverse(self) -> int:
        raise UnsupportedOperationError(f"{type(self).__name__} has no determinant inverse.")

    def inverse(self) -> "Matrix":
        raise UnsupportedOperationError(f"{type(self).__name__} has no inverse.")

    def is_square(self) -> bool:
        return self.width() == self.height()


class RowVector(Matrix):
    """A 1xN matrix."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)

    def multiply(self, other: Matrix) -> "RowVector":
        if self.width() != other.height():
            raise DimensionMismatchError(
                f"Cannot multiply 1x{self.width()} by {other.height()}x{other.width()}."
            )
        # Entries are left unreduced; callers reduce explicitly.
        out = [0] * other.width()
        for c in range(other.width()):
            for k in range(self.width()):
                out[c] += self._values[k] * other.get(k, c)
        return RowVector(out)

    def reduce_modulo(self, m: int) -> None:
        self._values = [normalize(v, m) for v in self._values]

    def _check(self, row: int, col: int) -> None:
        if row != 0:
            raise InvalidIndexError(f"Invalid row index {row} for a row vector.")
        if not 0 <= col < len(self._values):
            raise InvalidIndexError(f"Invalid column index {col} for a vector of width {len(self._values)}.")

    def get(self, row: int, col: int) -> int:
        self._check(row, col)
        return self._values[col]

    def set(self, row: int, col: int, value: int) -> None:
        self._check(row, col)
        self._values[col] = value

    def width(self) -> int:
        return len(self._values)

    def height(self) -> int:
        return 1

    def as_tuple(self) -> tuple[int, ...]:
        return tuple(self._values)

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RowVector):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"RowVector({self._values})"


_KEY_SLOTS = {(0, 0): "a", (0, 1): "b", (1, 0): "c", (1, 1): "d"}


class KeyMatrix(Matrix):
    """
    2x2 Hill cipher key under a fixed modulus:

        [a b]
        [c d]
    """

    __slots__ = ("modulus", "a", "b", "c", "d")

    def __init__(self, a: int, b: int, c: int, d: int, modulus: int = 26) -> None:
        self.modulus = modulus
        self.a = a
        self.b = b
        self.c = c
        self.d = d

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], modulus: int = 26) -> "KeyMatrix":
        if len(rows) != 2 or any(len(r) != 2 for r in rows):
            raise DimensionMismatchError("A key matrix needs exactly 2 rows of 2 entries.")
        (a, b), (c, d) = rows
        return cls(a, b, c, d, modulus)

    def update(self, a: int, b: int, c: int, d: int) -> None:
        self.a = a
        self.b = b
        self.c = c
        self.d = d

    def copy(self) -> "KeyMatrix":
        return KeyMatrix(self.a, self.b, self.c, self.d, self.modulus)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    def multiply(self, other: Matrix) -> Matrix:
        raise UnsupportedOperationError("A key matrix is never multiplied; multiply a vector by the key instead.")

    def reduce_modulo(self, m: int) -> None:
        self.a = normalize(self.a, m)
        self.b = normalize(self.b, m)
        self.c = normalize(self.c, m)
        self.d = normalize(self.d, m)

    def _slot(self, row: int, col: int) -> str:
        try:
            return _KEY_SLOTS[(row, col)]
        except KeyError:
            raise InvalidIndexError(f"Invalid index ({row}, {col}) for a 2x2 key matrix.") from None

    def get(self, row: int, col: int) -> int:
        return getattr(self, self._slot(row, col))

    def set(self, row: int, col: int, value: int) -> None:
        setattr(self, self._slot(row, col), value)

    def width(self) -> int:
        return 2

    def height(self) -> int:
        return 2

    def determinant(self) -> int:
        return normalize(self.a * self.d - self.b * self.c, self.modulus)

    def determinant_inverse(self) -> int:
        return inverse_by_scan(self.determinant(), self.modulus)

    def is_invertible(self) -> bool:
        try:
            self.determinant_inverse()
        except ValueError:
            return False
        return True

    def inverse(self) -> "KeyMatrix":
        # Always derived from the current entries; the solver mutates keys in place.
        inv = self.determinant_inverse()
        m = self.modulus
        return KeyMatrix(
            normalize(self.d * inv, m),
            normalize(-self.b * inv, m),
            normalize(-self.c * inv, m),
            normalize(self.a * inv, m),
            m,
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KeyMatrix):
            return self.as_tuple() == other.as_tuple() and self.modulus == other.modulus
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.as_tuple(), self.modulus))

    def __repr__(self) -> str:
        return f"[{self.a}, {self.b}; {self.c}, {self.d}]"
