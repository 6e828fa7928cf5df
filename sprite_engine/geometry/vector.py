"""Float vector value types."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sprite_engine.geometry.vector_int import Vec2i


def ieee_div(num: float, den: float) -> float:
    """Divide like an IEEE float unit: x/0 is a signed infinity and 0/0 is NaN."""
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


@dataclass(frozen=True, slots=True)
class Vec2:
    """2D float vector."""

    x: float
    y: float

    @classmethod
    def splat(cls, value: float) -> Vec2:
        return cls(float(value), float(value))

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)

    @classmethod
    def from_tuple(cls, values: tuple[float, float]) -> Vec2:
        return cls(float(values[0]), float(values[1]))

    @classmethod
    def from_array(cls, values: Sequence[float]) -> Vec2:
        if len(values) != 2:
            raise ValueError(f"Vec2 needs exactly 2 components, got {len(values)}.")
        return cls(float(values[0]), float(values[1]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def to_vec2i(self) -> Vec2i:
        """Narrow to integers, truncating toward zero."""
        from sprite_engine.geometry.vector_int import Vec2i

        return Vec2i(int(self.x), int(self.y))

    def transpose(self) -> Vec2:
        """Swap x and y."""
        return Vec2(self.y, self.x)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2 | float) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec2:
        if isinstance(other, (int, float)):
            return Vec2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: Vec2 | float) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(ieee_div(self.x, other.x), ieee_div(self.y, other.y))
        if isinstance(other, (int, float)):
            return Vec2(ieee_div(self.x, other), ieee_div(self.y, other))
        return NotImplemented

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True, slots=True)
class Vec3:
    """3D float vector."""

    x: float
    y: float
    z: float

    @classmethod
    def splat(cls, value: float) -> Vec3:
        return cls(float(value), float(value), float(value))

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_tuple(cls, values: tuple[float, float, float]) -> Vec3:
        return cls(float(values[0]), float(values[1]), float(values[2]))

    @classmethod
    def from_array(cls, values: Sequence[float]) -> Vec3:
        if len(values) != 3:
            raise ValueError(f"Vec3 needs exactly 3 components, got {len(values)}.")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z]

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(
                ieee_div(self.x, other.x),
                ieee_div(self.y, other.y),
                ieee_div(self.z, other.z),
            )
        if isinstance(other, (int, float)):
            return Vec3(ieee_div(self.x, other), ieee_div(self.y, other), ieee_div(self.z, other))
        return NotImplemented

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)
