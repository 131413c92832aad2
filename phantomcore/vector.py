"""Small 2-, 3- and 4-component float vectors and angle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Union


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (math.pi / 180.0)


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * (180.0 / math.pi)


@dataclass
class Vec2:
    """A mutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vec2) -> Vec2:
        """Add ``other`` in place and return this vector."""
        self.x += other.x
        self.y += other.y
        return self

    def subtract(self, other: Vec2) -> Vec2:
        """Subtract ``other`` in place and return this vector."""
        self.x -= other.x
        self.y -= other.y
        return self

    def dot(self, other: Vec2) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def angle(self, other: Vec2) -> float:
        """Return the angle between this vector and ``other`` in degrees."""
        this_mag = math.sqrt(self.x * self.x + self.y * self.y)
        other_mag = math.sqrt(other.x * other.x + other.y * other.y)
        cos_value = self.dot(other) / (this_mag * other_mag)
        cos_value = max(-1.0, min(1.0, cos_value))
        return to_degrees(math.acos(cos_value))

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2) -> float:
        return self.dot(other)

    def __iadd__(self, other: Vec2) -> Vec2:
        return self.add(other)

    def __isub__(self, other: Vec2) -> Vec2:
        return self.subtract(other)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"vec2: ({self.x}, {self.y})"


@dataclass
class Vec3:
    """A mutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: Vec3) -> Vec3:
        """Add ``other`` in place and return this vector."""
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def subtract(self, other: Vec3) -> Vec3:
        """Subtract ``other`` in place and return this vector."""
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def dot(self, other: Vec3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> Vec3:
        """Scale to unit length in place; a zero vector is left unchanged."""
        length_sq = self.x * self.x + self.y * self.y + self.z * self.z
        if length_sq == 0:
            return self
        inv = 1.0 / math.sqrt(length_sq)
        self.x *= inv
        self.y *= inv
        self.z *= inv
        return self

    def set_components(self, x: float, y: float, z: float) -> None:
        """Replace all three components."""
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, float]) -> Union[Vec3, float]:
        if isinstance(other, Vec3):
            return self.dot(other)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Vec3) -> Vec3:
        return self.add(other)

    def __isub__(self, other: Vec3) -> Vec3:
        return self.subtract(other)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"vec3: ({self.x}, {self.y},{self.z})"


@dataclass
class Vec4:
    """A mutable four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> Vec4:
        """Build a vector from exactly four values."""
        items = list(values)
        if len(items) != 4:
            raise ValueError(f"expected 4 values, got {len(items)}")
        return cls(*(float(v) for v in items))

    def add(self, other: Vec4) -> Vec4:
        """Add ``other`` in place and return this vector."""
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def subtract(self, other: Vec4) -> Vec4:
        """Subtract ``other`` in place and return this vector."""
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    def dot(self, other: Vec4) -> float:
        """Return the dot product with ``other``."""
        return (
            self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w
        )

    def scale(self, factor: float) -> Vec4:
        """Multiply every component by ``factor`` in place and return this vector."""
        self.x *= factor
        self.y *= factor
        self.z *= factor
        self.w *= factor
        return self

    def __add__(self, other: Vec4) -> Vec4:
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: Vec4) -> float:
        return self.dot(other)

    def __iadd__(self, other: Vec4) -> Vec4:
        return self.add(other)

    def __isub__(self, other: Vec4) -> Vec4:
        return self.subtract(other)

    def __imul__(self, factor: float) -> Vec4:
        return self.scale(factor)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __str__(self) -> str:
        return f"vec4: ({self.x}, {self.y},{self.z},{self.w})"