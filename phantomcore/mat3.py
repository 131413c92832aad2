"""3x3 float matrix stored in column-major order."""

from __future__ import annotations

from typing import Iterable, Union

from .vector import Vec3

_FLOAT_EPSILON = 1.1920928955078125e-07


class SingularMatrixError(ValueError):
    """Raised when a matrix has no inverse."""


class Mat3:
    """An immutable 3x3 matrix; ``elements`` holds nine floats column by column."""

    __slots__ = ("elements",)

    def __init__(self, *elements: float) -> None:
        if not elements:
            elements = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
        if len(elements) != 9:
            raise ValueError(f"expected 9 elements, got {len(elements)}")
        self.elements = tuple(float(e) for e in elements)

    @classmethod
    def diagonal(cls, value: float) -> Mat3:
        """Return a matrix with ``value`` on the diagonal and zero elsewhere."""
        return cls(value, 0.0, 0.0, 0.0, value, 0.0, 0.0, 0.0, value)

    @classmethod
    def _from_iterable(cls, values: Iterable[float]) -> Mat3:
        return cls(*values)

    def transpose(self) -> Mat3:
        """Return the transposed matrix."""
        e = self.elements
        return Mat3(e[0], e[3], e[6], e[1], e[4], e[7], e[2], e[5], e[8])

    def inverse(self) -> Mat3:
        """Return the inverse matrix; raise SingularMatrixError if there is none."""
        e = self.elements
        det = (
            e[0] * (e[4] * e[8] - e[7] * e[5])
            - e[1] * (e[3] * e[8] - e[5] * e[6])
            + e[2] * (e[3] * e[7] - e[4] * e[6])
        )
        if det == 0:
            raise SingularMatrixError("matrix is singular")
        inv = 1.0 / det
        return Mat3(
            (e[4] * e[8] - e[7] * e[5]) * inv,
            (e[2] * e[7] - e[1] * e[8]) * inv,
            (e[1] * e[5] - e[2] * e[4]) * inv,
            (e[5] * e[6] - e[3] * e[8]) * inv,
            (e[0] * e[8] - e[2] * e[6]) * inv,
            (e[3] * e[2] - e[0] * e[5]) * inv,
            (e[3] * e[7] - e[6] * e[4]) * inv,
            (e[6] * e[1] - e[0] * e[7]) * inv,
            (e[0] * e[4] - e[3] * e[1]) * inv,
        )

    def is_close(self, other: Mat3) -> bool:
        """True when every element differs from ``other``'s by at most float epsilon."""
        return all(
            abs(a - b) <= _FLOAT_EPSILON for a, b in zip(self.elements, other.elements)
        )

    def column(self, index: int) -> Vec3:
        """Return column ``index`` as a vector."""
        if not 0 <= index < 3:
            raise IndexError("column index out of range")
        base = index * 3
        return Vec3(*self.elements[base : base + 3])

    def __add__(self, other: Mat3) -> Mat3:
        return Mat3(*(a + b for a, b in zip(self.elements, other.elements)))

    def __mul__(self, other: Union[Mat3, float]) -> Mat3:
        if isinstance(other, Mat3):
            a = self.elements
            b = other.elements
            result = [0.0] * 9
            for col in range(3):
                for row in range(3):
                    result[col * 3 + row] = sum(
                        a[row + i * 3] * b[i + col * 3] for i in range(3)
                    )
            return Mat3(*result)
        return Mat3(*(e * other for e in self.elements))

    def __rmul__(self, factor: float) -> Mat3:
        return Mat3(*(e * factor for e in self.elements))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return self.elements == other.elements

    def __hash__(self) -> int:
        return hash(self.elements)

    def __repr__(self) -> str:
        return f"Mat3{self.elements}"