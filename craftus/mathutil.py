"""Small numeric helpers, a 3-component vector and xorshift generators."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

DEG_TO_RAD = math.pi * 2.0 / 360.0
RAD_TO_DEG = (1.0 / math.pi) * 180.0
TICKS_PER_MSEC = 268111.856

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def fast_floor(x: float) -> int:
    """Floor of ``x`` as an integer."""
    truncated = int(x)
    return truncated - (1 if x < truncated else 0)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between ``start`` and ``end``."""
    return start + (end - start) * t


def bilerp(q11: float, q21: float, q12: float, q22: float, x: float, y: float) -> float:
    """Bilinear interpolation of four corner values."""
    return lerp(lerp(q11, q21, x), lerp(q12, q22, x), y)


def trilerp(
    q111: float,
    q211: float,
    q121: float,
    q221: float,
    q112: float,
    q212: float,
    q122: float,
    q222: float,
    x: float,
    y: float,
    z: float,
) -> float:
    """Trilinear interpolation of eight corner values."""
    return lerp(
        bilerp(q111, q211, q112, q212, x, z),
        bilerp(q121, q221, q122, q222, x, z),
        y,
    )


def aabb_overlap(
    x0: float,
    y0: float,
    z0: float,
    w0: float,
    h0: float,
    d0: float,
    x1: float,
    y1: float,
    z1: float,
    w1: float,
    h1: float,
    d1: float,
) -> bool:
    """Whether two axis aligned boxes, given by origin and size, overlap or touch."""
    return (
        x0 <= x1 + w1
        and x0 + w0 >= x1
        and y0 <= y1 + h1
        and y0 + h0 >= y1
        and z0 <= z1 + d1
        and z0 + d0 >= z1
    )


def clamp(value, lo, hi):
    """Limit ``value`` to the range ``[lo, hi]``."""
    return min(max(value, lo), hi)


@dataclass(frozen=True)
class Float3:
    """An immutable three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def __add__(self, other: Float3) -> Float3:
        return Float3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Float3) -> Float3:
        return Float3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Float3:
        return Float3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Float3:
        return Float3(-self.x, -self.y, -self.z)

    def dot(self, other: Float3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Float3) -> Float3:
        return Float3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def magnitude_sqr(self) -> float:
        return self.dot(self)

    def normalized(self) -> Float3:
        """Unit vector in the same direction; raises ZeroDivisionError for zero."""
        m = self.magnitude()
        return Float3(self.x / m, self.y / m, self.z / m)

    def distance(self, other: Float3) -> float:
        return (self - other).magnitude()

    def minimum(self, other: Float3) -> Float3:
        return Float3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def maximum(self, other: Float3) -> Float3:
        return Float3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def clamp(self, lo: Float3, hi: Float3) -> Float3:
        return self.maximum(lo).minimum(hi)

    def with_axis(self, axis: int, value: float) -> Float3:
        """Copy with the component at ``axis`` (0, 1 or 2) replaced."""
        values = [self.x, self.y, self.z]
        values[axis] = value
        return Float3(*values)


class Xorshift32:
    """32-bit xorshift generator (shifts 13, 17, 5)."""

    DEFAULT_SEED = 314159265

    def __init__(self, state: int = DEFAULT_SEED) -> None:
        self.state = state & _MASK32

    def next(self) -> int:
        s = self.state
        s ^= (s << 13) & _MASK32
        s ^= s >> 17
        s ^= (s << 5) & _MASK32
        self.state = s
        return s

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()


class Xorshift64:
    """64-bit xorshift generator (shifts 13, 7, 17)."""

    DEFAULT_SEED = 88172645463325252

    def __init__(self, state: int = DEFAULT_SEED) -> None:
        self.state = state & _MASK64

    def next(self) -> int:
        s = self.state
        s ^= (s << 13) & _MASK64
        s ^= s >> 7
        s ^= (s << 17) & _MASK64
        self.state = s
        return s

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()