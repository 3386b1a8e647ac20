"""Axis aligned boxes and their intersection test."""

from __future__ import annotations

from dataclasses import dataclass

from craftus.mathutil import Float3

_FACE_NORMALS = (
    Float3(-1, 0, 0),
    Float3(1, 0, 0),
    Float3(0, -1, 0),
    Float3(0, 1, 0),
    Float3(0, 0, -1),
    Float3(0, 0, 1),
)


@dataclass(frozen=True)
class Box:
    """An axis aligned box from ``min`` (inclusive) to ``max`` (exclusive)."""

    min: Float3
    max: Float3

    @classmethod
    def from_extent(cls, x: float, y: float, z: float, w: float, h: float, d: float) -> Box:
        return cls(Float3(x, y, z), Float3(x + w, y + h, z + d))

    def contains(self, x: float, y: float, z: float) -> bool:
        return (
            self.min.x <= x
            and self.min.y <= y
            and self.min.z <= z
            and self.max.x > x
            and self.max.y > y
            and self.max.z > z
        )


@dataclass(frozen=True)
class Intersection:
    """Face of least penetration: its normal, the depth and the face index."""

    normal: Float3
    depth: float
    face: int


def box_intersect(a: Box, b: Box, ignore_faces: int = 0) -> Intersection | None:
    """Test ``b`` against ``a``; None if they do not intersect.

    Faces whose bit is set in ``ignore_faces`` are not chosen as the collided face.
    """
    distances = (
        b.max.x - a.min.x,
        a.max.x - b.min.x,
        b.max.y - a.min.y,
        a.max.y - b.min.y,
        b.max.z - a.min.z,
        a.max.z - b.min.z,
    )
    normal = Float3()
    depth = 0.0
    face = 0
    for i, distance in enumerate(distances):
        if distance < 0.0:
            return None
        if ignore_faces & (1 << i):
            continue
        if i == 0 or distance < depth:
            face = i
            normal = _FACE_NORMALS[i]
            depth = distance
    return Intersection(normal, depth, face)