"""Sprite sheet domain models."""

from __future__ import annotations

from dataclasses import dataclass, field

from atlas_editor.core.grid import AtlasGrid
from sprite_engine.geometry import Aabb2i


@dataclass(frozen=True, slots=True)
class Sprite:
    """Named cell range within an atlas."""

    name: str
    cells: Aabb2i


@dataclass(frozen=True, slots=True)
class SpriteSheet:
    """Atlas texture plus the sprites cut from it."""

    name: str
    atlas_path: str
    grid: AtlasGrid = field(default_factory=AtlasGrid)
    sprites: tuple[Sprite, ...] = ()

    def sprite(self, name: str) -> Sprite | None:
        for sprite in self.sprites:
            if sprite.name == name:
                return sprite
        return None

    def sprite_names(self) -> list[str]:
        return [sprite.name for sprite in self.sprites]
