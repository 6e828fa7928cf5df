"""Half-open integer axis-aligned bounding box."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import reduce

from sprite_engine.geometry.aabb import Aabb2
from sprite_engine.geometry.vector_int import Vec2i


@dataclass(frozen=True, slots=True)
class Aabb2i:
    """Half-open 2D range: ``min`` is inside, ``max`` is outside.

    The default value spans ``(0, 0)..(0, 0)`` and is empty.
    """

    min: Vec2i = field(default_factory=Vec2i.zero)
    max: Vec2i = field(default_factory=Vec2i.zero)

    @classmethod
    def new(cls, a: Vec2i, b: Vec2i) -> Aabb2i:
        """Build from any two opposite corners, in either order."""
        return cls(
            min=Vec2i(min(a.x, b.x), min(a.y, b.y)),
            max=Vec2i(max(a.x, b.x), max(a.y, b.y)),
        )

    @classmethod
    def new_empty(cls) -> Aabb2i:
        return cls()

    @classmethod
    def around_point(cls, center: Vec2i, extents: Vec2i) -> Aabb2i:
        return cls.new(center - extents, center + extents)

    @classmethod
    def from_min_point(cls, min_point: Vec2i, size: Vec2i) -> Aabb2i:
        """Box of ``size`` anchored at ``min_point``; negative sizes extend backwards."""
        return cls.new(min_point, min_point + size)

    def to_aabb2(self) -> Aabb2:
        """Closed float view of the same numeric extent.

        The exclusive ``max`` becomes inclusive, so this is not an exact
        equivalent for point tests.
        """
        return Aabb2.new(self.min.to_vec2(), self.max.to_vec2())

    def scale(self, factor: int) -> Aabb2i:
        return Aabb2i.new(self.min * factor, self.max * factor)

    def union(self, rhs: Aabb2i) -> Aabb2i:
        """Smallest box covering both; an empty operand yields the other unchanged."""
        if self.is_empty():
            return rhs
        if rhs.is_empty():
            return self
        min_rect = Aabb2i.new(self.min, rhs.min)
        max_rect = Aabb2i.new(self.max, rhs.max)
        return Aabb2i.new(min_rect.min, max_rect.max)

    def is_empty(self) -> bool:
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def contains_point(self, point: Vec2i) -> bool:
        return self.min.x <= point.x < self.max.x and self.min.y <= point.y < self.max.y

    def size(self) -> Vec2i:
        return self.max - self.min


def union_all(boxes: Iterable[Aabb2i]) -> Aabb2i:
    """Fold boxes with ``Aabb2i.union``, starting from the empty box."""
    return reduce(Aabb2i.union, boxes, Aabb2i.new_empty())
