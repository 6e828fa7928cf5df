"""Integer vector value types.

Python integers never wrap, so component products that would overflow a
32-bit integer (large ``length()`` inputs, extreme scale factors) are computed
exactly rather than rejected. Keeping values inside the 32-bit range is the
caller's concern when they are handed to code that assumes it.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from sprite_engine.geometry.vector import Vec2, Vec3


@dataclass(frozen=True, slots=True)
class Vec2i:
    """2D integer vector."""

    x: int
    y: int

    @classmethod
    def splat(cls, value: int) -> Vec2i:
        return cls(value, value)

    @classmethod
    def zero(cls) -> Vec2i:
        return cls(0, 0)

    @classmethod
    def from_tuple(cls, values: tuple[int, int]) -> Vec2i:
        return cls(values[0], values[1])

    @classmethod
    def from_array(cls, values: Sequence[int]) -> Vec2i:
        if len(values) != 2:
            raise ValueError(f"Vec2i needs exactly 2 components, got {len(values)}.")
        return cls(int(values[0]), int(values[1]))

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def to_array(self) -> list[int]:
        return [self.x, self.y]

    def to_vec2(self) -> Vec2:
        """Widen to floats. Magnitudes above 2**53 lose precision."""
        return Vec2(float(self.x), float(self.y))

    def transpose(self) -> Vec2i:
        """Swap x and y."""
        return Vec2i(self.y, self.x)

    def length(self) -> float:
        """Euclidean length, computed in floating point."""
        return math.sqrt(float(self.x * self.x + self.y * self.y))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2i) -> Vec2i:
        return Vec2i(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2i) -> Vec2i:
        return Vec2i(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2i | int) -> Vec2i:
        if isinstance(other, Vec2i):
            return Vec2i(self.x * other.x, self.y * other.y)
        if isinstance(other, int):
            return Vec2i(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: int) -> Vec2i:
        if isinstance(other, int):
            return Vec2i(other * self.x, other * self.y)
        return NotImplemented

    def __floordiv__(self, other: Vec2i | int) -> Vec2i:
        if isinstance(other, Vec2i):
            return Vec2i(self.x // other.x, self.y // other.y)
        if isinstance(other, int):
            return Vec2i(self.x // other, self.y // other)
        return NotImplemented

    def __mod__(self, other: Vec2i | int) -> Vec2i:
        if isinstance(other, Vec2i):
            return Vec2i(self.x % other.x, self.y % other.y)
        if isinstance(other, int):
            return Vec2i(self.x % other, self.y % other)
        return NotImplemented

    def __truediv__(self, other: Vec2i | float) -> Vec2:
        if isinstance(other, Vec2i):
            return self.to_vec2() / other.to_vec2()
        if isinstance(other, (int, float)):
            return self.to_vec2() / float(other)
        return NotImplemented

    def __neg__(self) -> Vec2i:
        return Vec2i(-self.x, -self.y)


@dataclass(frozen=True, slots=True)
class Vec3i:
    """3D integer vector."""

    x: int
    y: int
    z: int

    @classmethod
    def splat(cls, value: int) -> Vec3i:
        return cls(value, value, value)

    @classmethod
    def zero(cls) -> Vec3i:
        return cls(0, 0, 0)

    @classmethod
    def from_tuple(cls, values: tuple[int, int, int]) -> Vec3i:
        return cls(values[0], values[1], values[2])

    @classmethod
    def from_array(cls, values: Sequence[int]) -> Vec3i:
        if len(values) != 3:
            raise ValueError(f"Vec3i needs exactly 3 components, got {len(values)}.")
        return cls(int(values[0]), int(values[1]), int(values[2]))

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def to_array(self) -> list[int]:
        return [self.x, self.y, self.z]

    def to_vec3(self) -> Vec3:
        return Vec3(float(self.x), float(self.y), float(self.z))

    def length(self) -> float:
        return math.sqrt(float(self.x * self.x + self.y * self.y + self.z * self.z))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3i) -> Vec3i:
        return Vec3i(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3i) -> Vec3i:
        return Vec3i(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3i | int) -> Vec3i:
        if isinstance(other, Vec3i):
            return Vec3i(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, int):
            return Vec3i(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: int) -> Vec3i:
        if isinstance(other, int):
            return Vec3i(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __floordiv__(self, other: Vec3i | int) -> Vec3i:
        if isinstance(other, Vec3i):
            return Vec3i(self.x // other.x, self.y // other.y, self.z // other.z)
        if isinstance(other, int):
            return Vec3i(self.x // other, self.y // other, self.z // other)
        return NotImplemented

    def __mod__(self, other: Vec3i | int) -> Vec3i:
        if isinstance(other, Vec3i):
            return Vec3i(self.x % other.x, self.y % other.y, self.z % other.z)
        if isinstance(other, int):
            return Vec3i(self.x % other, self.y % other, self.z % other)
        return NotImplemented

    def __truediv__(self, other: Vec3i | float) -> Vec3:
        if isinstance(other, Vec3i):
            return self.to_vec3() / other.to_vec3()
        if isinstance(other, (int, float)):
            return self.to_vec3() / float(other)
        return NotImplemented

    def __neg__(self) -> Vec3i:
        return Vec3i(-self.x, -self.y, -self.z)
