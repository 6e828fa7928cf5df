"""Sprite sheet use cases."""

from __future__ import annotations

import logging
from dataclasses import replace

from atlas_editor.sprites.models import Sprite, SpriteSheet
from atlas_editor.sprites.repository import SpriteSheetRepository
from atlas_editor.sprites.schema import payload_to_sheet, sheet_to_payload
from atlas_editor.sprites.validation import validate_sheet, validate_sprite
from sprite_engine.geometry import Aabb2i

logger = logging.getLogger(__name__)


class SpriteSheetService:
    """High-level sprite sheet operations with schema and rules validation."""

    def __init__(self, repository: SpriteSheetRepository) -> None:
        self._repository = repository

    def list_sheets(self) -> list[str]:
        """List available sheet names."""
        return self._repository.list_names()

    def save_sheet(self, sheet: SpriteSheet) -> None:
        """Validate and persist a sheet."""
        valid, reason = validate_sheet(sheet)
        if not valid:
            raise ValueError(reason)
        self._repository.save_payload(sheet.name, sheet_to_payload(sheet))

    def load_sheet(self, name: str) -> SpriteSheet:
        """Load and validate a sheet."""
        sheet = payload_to_sheet(self._repository.load_payload(name))
        valid, reason = validate_sheet(sheet)
        if not valid:
            raise ValueError(f"Sprite sheet '{name}' is invalid: {reason}")
        return sheet

    def add_sprite(self, sheet_name: str, sprite_name: str, cells: Aabb2i) -> SpriteSheet:
        """Add or replace a sprite on a stored sheet."""
        sheet = self.load_sheet(sheet_name)
        sprite = Sprite(name=sprite_name.strip(), cells=cells)
        valid, reason = validate_sprite(sheet, sprite)
        if not valid:
            raise ValueError(reason)
        kept = tuple(existing for existing in sheet.sprites if existing.name != sprite.name)
        updated = replace(sheet, sprites=(*kept, sprite))
        self.save_sheet(updated)
        logger.info(
            "sprite_added sheet=%s sprite=%s min=%s max=%s",
            sheet.name,
            sprite.name,
            cells.min.to_tuple(),
            cells.max.to_tuple(),
        )
        return updated

    def remove_sprite(self, sheet_name: str, sprite_name: str) -> SpriteSheet:
        """Remove a sprite from a stored sheet."""
        sheet = self.load_sheet(sheet_name)
        if sheet.sprite(sprite_name) is None:
            raise ValueError(f"Sprite '{sprite_name}' not found in sheet '{sheet_name}'.")
        updated = replace(
            sheet,
            sprites=tuple(sprite for sprite in sheet.sprites if sprite.name != sprite_name),
        )
        self.save_sheet(updated)
        logger.info("sprite_removed sheet=%s sprite=%s", sheet.name, sprite_name)
        return updated

    def rename_sheet(self, old_name: str, new_name: str) -> None:
        self._repository.rename(old_name, new_name)

    def delete_sheet(self, name: str) -> None:
        self._repository.delete(name)
