"""Engine-owned 2D geometry kernel."""

from sprite_engine.geometry.aabb import Aabb2
from sprite_engine.geometry.aabb_int import Aabb2i, union_all
from sprite_engine.geometry.vector import Vec2, Vec3
from sprite_engine.geometry.vector_int import Vec2i, Vec3i

__all__ = [
    "Aabb2",
    "Aabb2i",
    "Vec2",
    "Vec2i",
    "Vec3",
    "Vec3i",
    "union_all",
]
