"""4x4 float matrix stored in column-major order, plus transform helpers."""

from __future__ import annotations

import math
from typing import Tuple, Union

from .mat3 import Mat3, SingularMatrixError
from .vector import Vec3, Vec4, to_radians

_POLAR_ITERATION_LIMIT = 1024


def _cofactor(i: int, j: int, m: Tuple[float, ...]) -> float:
    """Signed cofactor used to build the adjugate of a 4x4 matrix."""
    pre_i = 3 if i == 0 else i - 1
    next_i = 0 if i + 1 == 4 else i + 1
    next_next_i = i - 2 if i + 2 >= 4 else i + 2
    pre_j = 3 if j == 0 else j - 1
    next_j = 0 if j + 1 == 4 else j + 1
    next_next_j = j - 2 if j + 2 >= 4 else j + 2
    o = abs(i - j)

    def e(a: int, b: int) -> float:
        return m[a * 4 + b]

    inv = (
        e(next_i, next_j) * e(next_next_i, next_next_j) * e(pre_i, pre_j)
        + e(next_i, next_next_j) * e(next_next_i, pre_j) * e(pre_i, next_j)
        + e(next_i, pre_j) * e(next_next_i, next_j) * e(pre_i, next_next_j)
        - e(next_i, next_j) * e(next_next_i, pre_j) * e(pre_i, next_next_j)
        - e(next_i, next_next_j) * e(next_next_i, next_j) * e(pre_i, pre_j)
        - e(next_i, pre_j) * e(next_next_i, next_next_j) * e(pre_i, next_j)
    )
    return -inv if o & 1 else inv


class Mat4:
    """An immutable 4x4 matrix; ``elements`` holds sixteen floats column by column."""

    __slots__ = ("elements",)

    def __init__(self, *elements: float) -> None:
        if not elements:
            elements = (
                1.0, 0.0, 0.0, 0.0,
                0.0, 1.0, 0.0, 0.0,
                0.0, 0.0, 1.0, 0.0,
                0.0, 0.0, 0.0, 1.0,
            )
        if len(elements) != 16:
            raise ValueError(f"expected 16 elements, got {len(elements)}")
        self.elements = tuple(float(e) for e in elements)

    @classmethod
    def diagonal(cls, value: float) -> Mat4:
        """Return a matrix with ``value`` on the diagonal and zero elsewhere."""
        values = [0.0] * 16
        for i in range(4):
            values[i + i * 4] = value
        return cls(*values)

    @classmethod
    def identity(cls) -> Mat4:
        """Return the identity matrix."""
        return cls.diagonal(1.0)

    @classmethod
    def translation(cls, offset: Vec3) -> Mat4:
        """Return a matrix translating by ``offset``."""
        values = list(cls.identity().elements)
        values[12] = offset.x
        values[13] = offset.y
        values[14] = offset.z
        return cls(*values)

    @classmethod
    def rotation(cls, angle: float, axis: Vec3) -> Mat4:
        """Return a rotation of ``angle`` degrees about ``axis``."""
        values = list(cls.identity().elements)
        r = to_radians(angle)
        c = math.cos(r)
        s = math.sin(r)
        omc = 1.0 - c
        x, y, z = axis.x, axis.y, axis.z

        values[0] = x * omc + c
        values[1] = y * x * omc + z * s
        values[2] = x * z * omc - y * s

        values[4] = x * y * omc - z * s
        values[5] = y * omc + c
        values[6] = y * z * omc + x * s

        values[8] = x * z * omc + y * s
        values[9] = y * z * omc - x * s
        values[10] = z * omc + c
        return cls(*values)

    @classmethod
    def scaling(cls, factors: Vec3) -> Mat4:
        """Return a matrix scaling by ``factors`` along each axis."""
        values = list(cls.identity().elements)
        values[0] = factors.x
        values[5] = factors.y
        values[10] = factors.z
        return cls(*values)

    @classmethod
    def orthographic(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Mat4:
        """Return an orthographic projection with depth mapped by ``near / (near - far)``."""
        values = list(cls.identity().elements)
        values[0] = 2.0 / (right - left)
        values[5] = 2.0 / (top - bottom)
        values[10] = 2.0 / (near - far)
        values[12] = (left + right) / (left - right)
        values[13] = (bottom + top) / (bottom - top)
        values[14] = near / (near - far)
        return cls(*values)

    @classmethod
    def perspective(
        cls, fov: float, aspect_ratio: float, near: float, far: float
    ) -> Mat4:
        """Return a perspective projection; ``fov`` is the vertical field of view in radians."""
        values = list(cls.identity().elements)
        q = 1.0 / math.tan(0.5 * fov)
        a = q / aspect_ratio
        b = -1.0 * (near + far) / (far - near)
        c = -1.0 * (2.0 * near * far) / (far - near)
        values[0] = a
        values[5] = q
        values[10] = b
        values[11] = -1.0
        values[14] = c
        return cls(*values)

    @classmethod
    def look_at(cls, position: Vec3, focal: Vec3, up: Vec3) -> Mat4:
        """Return a view matrix for a camera at ``position`` looking at ``focal``."""
        zaxis = (position - focal).normalize()
        xaxis = up.cross(zaxis).normalize()
        yaxis = zaxis.cross(xaxis)
        return cls(
            xaxis.x, yaxis.x, zaxis.x, 0.0,
            xaxis.y, yaxis.y, zaxis.y, 0.0,
            xaxis.z, yaxis.z, zaxis.z, 0.0,
            -xaxis.dot(position), -yaxis.dot(position), -zaxis.dot(position), 1.0,
        )

    def column(self, index: int) -> Vec4:
        """Return column ``index`` as a vector."""
        if not 0 <= index < 4:
            raise IndexError("column index out of range")
        base = index * 4
        return Vec4(*self.elements[base : base + 4])

    def transpose(self) -> Mat4:
        """Return the transposed matrix."""
        e = self.elements
        return Mat4(*(e[row * 4 + col] for col in range(4) for row in range(4)))

    def inverse(self) -> Mat4:
        """Return the inverse matrix; raise SingularMatrixError if there is none."""
        e = self.elements
        inv = [0.0] * 16
        for i in range(4):
            for j in range(4):
                inv[j * 4 + i] = _cofactor(i, j, e)
        det = sum(e[k] * inv[k * 4] for k in range(4))
        if det == 0:
            raise SingularMatrixError("matrix is singular")
        factor = 1.0 / det
        return Mat4(*(v * factor for v in inv))

    def __mul__(self, other: Union[Mat4, Vec4]) -> Union[Mat4, Vec4]:
        e = self.elements
        if isinstance(other, Vec4):
            v = (other.x, other.y, other.z, other.w)
            return Vec4(
                *(sum(e[row + 4 * i] * v[i] for i in range(4)) for row in range(4))
            )
        if isinstance(other, Mat4):
            o = other.elements
            return Mat4(
                *(
                    sum(e[row + 4 * i] * o[i + col * 4] for i in range(4))
                    for col in range(4)
                    for row in range(4)
                )
            )
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.elements == other.elements

    def __hash__(self) -> int:
        return hash(self.elements)

    def __repr__(self) -> str:
        return f"Mat4{self.elements}"

    def __str__(self) -> str:
        e = self.elements
        prefixes = ("mat4x4: (", "        (", "        (", "        (")
        lines = (
            f"{prefixes[r]}{e[r]}, {e[r + 4]},{e[r + 8]},{e[r + 12]})"
            for r in range(4)
        )
        return "\n".join(lines) + "\n"


def rotation_x(angle: float) -> Mat4:
    """Return the engine's rotation matrix about X for ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Mat4(
        1.0, 0.0, 0.0, 0.0,
        0.0, c, -s, 0.0,
        0.0, s, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotation_y(angle: float) -> Mat4:
    """Return the engine's rotation matrix about Y for ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Mat4(
        c, 0.0, s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        -s, 0.0, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotation_z(angle: float) -> Mat4:
    """Return the engine's rotation matrix about Z for ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Mat4(
        c, -s, 0.0, 0.0,
        s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def scale_matrix(x: float, y: float, z: float) -> Mat4:
    """Return a matrix scaling by ``x``, ``y`` and ``z``."""
    return Mat4(
        x, 0.0, 0.0, 0.0,
        0.0, y, 0.0, 0.0,
        0.0, 0.0, z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def with_translation(matrix: Mat4, x: float, y: float, z: float) -> Mat4:
    """Return ``matrix`` with its translation column replaced by ``x, y, z``."""
    values = list(matrix.elements)
    values[12] = x
    values[13] = y
    values[14] = z
    return Mat4(*values)


def polar_decompose(matrix: Mat3) -> Tuple[Mat3, Mat3]:
    """Split ``matrix`` into an orthogonal part U and a stretch P with matrix = U * P."""
    u = matrix
    iterations = 0
    while True:
        iterations += 1
        if iterations >= _POLAR_ITERATION_LIMIT:
            raise ArithmeticError("polar decomposition did not converge")
        previous = u
        u = (u + u.inverse().transpose()) * 0.5
        if u.is_close(previous):
            break
    p = u.inverse() * matrix
    return u, p


def compose(rotation: Vec3, scalar: Vec3, translation: Vec3) -> Mat4:
    """Build translation * rotation * scale from Euler angles in radians."""
    rotate = (
        rotation_x(rotation.x) * rotation_y(rotation.y) * rotation_z(rotation.z)
    ).transpose()
    scale = scale_matrix(scalar.x, scalar.y, scalar.z)
    move = with_translation(Mat4.identity(), translation.x, translation.y, translation.z)
    return move * rotate * scale


def decompose(matrix: Mat4) -> Tuple[Vec3, Vec3, Vec3]:
    """Return (rotation, scale, translation) recovered from a transform matrix."""
    e = matrix.elements
    translation = Vec3(e[12], e[13], e[14])
    bases = Mat3(e[0], e[1], e[2], e[4], e[5], e[6], e[8], e[9], e[10])
    u, p = polar_decompose(bases)
    scalar = Vec3(p.elements[0], p.elements[4], p.elements[8])
    ue = u.elements
    theta_x = math.atan2(ue[5], ue[8])
    theta_y = -math.asin(max(-1.0, min(1.0, ue[2])))
    theta_z = math.atan2(ue[1], ue[0])
    return Vec3(theta_x, theta_y, theta_z), scalar, translation