"""Angle conversion, 3D vectors and 4x4 matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Tuple

Row = Tuple[float, float, float, float]


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180.0 / math.pi


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Matrix:
    """An immutable 4x4 matrix stored as rows, for row-vector transforms."""

    rows: Tuple[Row, Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a matrix needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @staticmethod
    def identity() -> Matrix:
        """Return the identity matrix."""
        return Matrix(
            tuple(
                tuple(1.0 if r == c else 0.0 for c in range(4)) for r in range(4)
            )
        )

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def _columns(self) -> Iterable[Tuple[float, ...]]:
        return zip(*self.rows)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(
            tuple(
                tuple(a + b for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.rows, other.rows)
            )
        )

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        columns = list(other._columns())
        return Matrix(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self.rows
            )
        )


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> Vector3:
        if isinstance(other, Matrix):
            return self.transform(other)
        if _is_scalar(other):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, factor: object) -> Vector3:
        if _is_scalar(factor):
            return Vector3(self.x * factor, self.y * factor, self.z * factor)
        return NotImplemented

    def __truediv__(self, factor: object) -> Vector3:
        if not _is_scalar(factor):
            return NotImplemented
        inverse = 1.0 / factor
        return Vector3(self.x * inverse, self.y * inverse, self.z * inverse)

    def transform(self, matrix: Matrix) -> Vector3:
        """Transform this point as a row vector by ``matrix``, with translation."""
        m = matrix.rows
        return Vector3(
            self.x * m[0][0] + self.y * m[1][0] + self.z * m[2][0] + m[3][0],
            self.x * m[0][1] + self.y * m[1][1] + self.z * m[2][1] + m[3][1],
            self.x * m[0][2] + self.y * m[1][2] + self.z * m[2][2] + m[3][2],
        )