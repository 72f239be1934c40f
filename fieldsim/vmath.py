"""Small vector and quaternion helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

Matrix4 = Tuple[
    Tuple[float, float, float, float],
    Tuple[float, float, float, float],
    Tuple[float, float, float, float],
    Tuple[float, float, float, float],
]


@dataclass(frozen=True)
class Vec3:
    """A 3D vector."""

    x: float
    y: float
    z: float

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z


@dataclass(frozen=True)
class Quat:
    """A quaternion with scalar part ``w`` and vector part ``(x, y, z)``."""

    w: float
    x: float
    y: float
    z: float

    def vector(self) -> Vec3:
        """The vector part."""
        return Vec3(self.x, self.y, self.z)

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        v1, v2 = self.vector(), other.vector()
        return Quat(
            w=self.w * other.w - v1.dot(v2),
            x=v2.x * self.w + v1.x * other.w + (v1.y * v2.z - v1.z * v2.y),
            y=v2.y * self.w + v1.y * other.w + (v1.z * v2.x - v1.x * v2.z),
            z=v2.z * self.w + v1.z * other.w + (v1.x * v2.y - v1.y * v2.x),
        )

    def rotate(self, angle: float, x: float, y: float, z: float) -> Quat:
        """Compose with a rotation of ``angle`` radians about axis (x, y, z)."""
        half = angle * 0.5
        s = math.sin(half)
        return self * Quat(math.cos(half), x * s, y * s, z * s)

    def to_matrix(self) -> Matrix4:
        """The 4x4 rotation matrix, indexed ``m[column][row]``."""
        w, x, y, z = self.w, self.x, self.y, self.z
        rows = (
            (1.0 - 2.0 * y * y - 2.0 * z * z, 2.0 * x * y + 2.0 * w * z,
             2.0 * z * x - 2.0 * w * y, 0.0),
            (2.0 * x * y - 2.0 * w * z, 1.0 - 2.0 * x * x - 2.0 * z * z,
             2.0 * y * z + 2.0 * w * x, 0.0),
            (2.0 * z * x + 2.0 * w * y, 2.0 * y * z - 2.0 * w * x,
             1.0 - 2.0 * x * x - 2.0 * y * y, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
        return tuple(zip(*rows))  # type: ignore[return-value]