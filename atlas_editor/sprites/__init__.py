"""Sprite sheet models and persistence."""

from atlas_editor.sprites.models import Sprite, SpriteSheet
from atlas_editor.sprites.repository import SpriteSheetRepository
from atlas_editor.sprites.service import SpriteSheetService

__all__ = ["Sprite", "SpriteSheet", "SpriteSheetRepository", "SpriteSheetService"]
