"""Row-major matrices with 2x2 and 3x3 transform helpers."""

from __future__ import annotations

import math
from typing import Iterable, Union

from .vector import Vec2, Vec3

Number = Union[int, float]


def _build(height: int, width: int, data: list) -> "Matrix":
    if (height, width) == (2, 2):
        return Matrix22(data)
    if (height, width) == (3, 3):
        return Matrix33(data)
    return Matrix(height, width, data)


class Matrix:
    """A ``height`` x ``width`` matrix stored row by row.

    Missing values are filled with zero; surplus values are ignored.
    """

    def __init__(self, height: int, width: int, values: Iterable[Number] = ()):
        if height <= 0 or width <= 0:
            raise ValueError("matrix dimensions must be positive")
        size = height * width
        data = list(values)[:size]
        data.extend([0] * (size - len(data)))
        self._height = height
        self._width = width
        self._data = tuple(data)

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def data(self) -> tuple:
        return self._data

    def at(self, row: int, col: int):
        """The element in ``row``, ``col``."""
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError("matrix index out of range")
        return self._data[row * self._width + col]

    def __getitem__(self, index: int):
        return self._data[index]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def _same_shape(self, other: "Matrix") -> None:
        if (self._height, self._width) != (other._height, other._width):
            raise ValueError("matrices must have the same shape")

    def __add__(self, other: Union["Matrix", Number]) -> "Matrix":
        if isinstance(other, Matrix):
            self._same_shape(other)
            data = [a + b for a, b in zip(self._data, other._data)]
        elif isinstance(other, (int, float)):
            data = [a + other for a in self._data]
        else:
            return NotImplemented
        return _build(self._height, self._width, data)

    def __sub__(self, other: Union["Matrix", Number]) -> "Matrix":
        if isinstance(other, Matrix):
            self._same_shape(other)
            data = [a - b for a, b in zip(self._data, other._data)]
        elif isinstance(other, (int, float)):
            data = [a - other for a in self._data]
        else:
            return NotImplemented
        return _build(self._height, self._width, data)

    def __mul__(self, other: Union["Matrix", Number]) -> "Matrix":
        if isinstance(other, (int, float)):
            return _build(self._height, self._width, [a * other for a in self._data])
        if not isinstance(other, Matrix):
            return NotImplemented
        if other._height != self._width:
            raise ValueError("columns of the first matrix must equal rows of the second")
        data = [
            sum(self.at(row, i) * other.at(i, col) for i in range(self._width))
            for row in range(self._height)
            for col in range(other._width)
        ]
        return _build(self._height, other._width, data)

    def __truediv__(self, value: Number) -> "Matrix":
        if not isinstance(value, (int, float)):
            return NotImplemented
        return _build(self._height, self._width, [a / value for a in self._data])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._height == other._height
            and self._width == other._width
            and self._data == other._data
        )

    def __hash__(self) -> int:
        return hash((self._height, self._width, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._height}x{self._width}, {list(self._data)})"


class Matrix22(Matrix):
    """A 2x2 matrix for 2D linear transforms."""

    def __init__(self, values: Iterable[Number] = ()):
        super().__init__(2, 2, values)

    @classmethod
    def identity(cls) -> "Matrix22":
        return cls([1.0, 0.0, 0.0, 1.0])

    @classmethod
    def rotation(cls, rad: float) -> "Matrix22":
        """Counter-clockwise rotation. Compose transforms right to left."""
        c, s = math.cos(rad), math.sin(rad)
        return cls([c, -s, s, c])

    @classmethod
    def scale(cls, scale: Vec2) -> "Matrix22":
        return cls([scale.x, 0.0, 0.0, scale.y])

    def transform(self, vector: Vec2) -> Vec2:
        d = self._data
        return Vec2(d[0] * vector.x + d[1] * vector.y, d[2] * vector.x + d[3] * vector.y)


class Matrix33(Matrix):
    """A 3x3 matrix for 2D affine transforms in homogeneous coordinates."""

    def __init__(self, values: Iterable[Number] = ()):
        super().__init__(3, 3, values)

    @classmethod
    def identity(cls) -> "Matrix33":
        return cls([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0])

    @classmethod
    def translation(cls, offset: Vec2) -> "Matrix33":
        return cls([1.0, 0.0, offset.x, 0.0, 1.0, offset.y, 0.0, 0.0, 1.0])

    @classmethod
    def rotation_z(cls, rad: float) -> "Matrix33":
        c, s = math.cos(rad), math.sin(rad)
        return cls([c, -s, 0.0, s, c, 0.0, 0.0, 0.0, 1.0])

    @classmethod
    def scale(cls, scale: Vec2) -> "Matrix33":
        return cls([scale.x, 0.0, 0.0, 0.0, scale.y, 0.0, 0.0, 0.0, 1.0])

    def transform(self, vector: Union[Vec2, Vec3]) -> Union[Vec2, Vec3]:
        """Apply to a Vec3, or to a Vec2 taken as the point (x, y, 1)."""
        if isinstance(vector, Vec3):
            n = self * Matrix(3, 1, [vector.x, vector.y, vector.z])
            return Vec3(n[0], n[1], n[2])
        if isinstance(vector, Vec2):
            n = self * Matrix(3, 1, [vector.x, vector.y, 1.0])
            return Vec2(n[0], n[1])
        raise TypeError("transform expects a Vec2 or Vec3")