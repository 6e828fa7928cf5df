"""Closed float axis-aligned bounding box."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sprite_engine.geometry.vector import Vec2


@dataclass(frozen=True, slots=True, eq=False)
class Aabb2:
    """Closed 2D range: both ``min`` and ``max`` lie inside the box.

    Has no structural ``==``; compare ``min``/``max`` with a tolerance.
    """

    min: Vec2
    max: Vec2

    @classmethod
    def new(cls, a: Vec2, b: Vec2) -> Aabb2:
        """Build from any two opposite corners, in either order."""
        return cls(
            min=Vec2(min(a.x, b.x), min(a.y, b.y)),
            max=Vec2(max(a.x, b.x), max(a.y, b.y)),
        )

    @classmethod
    def new_empty(cls) -> Aabb2:
        """Inverted infinite box, the identity for bounding-box accumulation."""
        return cls(min=Vec2.splat(math.inf), max=Vec2.splat(-math.inf))

    @classmethod
    def around_point(cls, center: Vec2, extents: Vec2) -> Aabb2:
        return cls.new(center - extents, center + extents)

    def is_empty(self) -> bool:
        """True when either axis has zero or negative extent.

        Zero-area boxes count as empty even though ``contains_point`` accepts
        their corners.
        """
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def scale(self, factor: float) -> Aabb2:
        """Scale both corners about the coordinate origin, not the box center."""
        return Aabb2.new(self.min * factor, self.max * factor)

    def contains_point(self, point: Vec2) -> bool:
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def size(self) -> Vec2:
        return self.max - self.min

    def map_to_percentage(self, point: Vec2) -> Vec2:
        """Map an absolute point into this box's unit parameterization.

        An axis with zero extent yields inf or NaN on that axis; check
        ``is_empty()`` first when the box may be degenerate.
        """
        return (point - self.min) / self.size()

    def map_from_percentage(self, point: Vec2) -> Vec2:
        """Map a unit-space point back into absolute coordinates."""
        return point * self.size() + self.min
