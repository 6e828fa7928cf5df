"""Sprite sheet validation rules."""

from __future__ import annotations

from atlas_editor.sprites.models import Sprite, SpriteSheet
from sprite_engine.geometry import Vec2i


def validate_sprite(sheet: SpriteSheet, sprite: Sprite) -> tuple[bool, str]:
    """Validate one sprite against its sheet's grid."""
    if not sprite.name.strip():
        return False, "Sprite name cannot be empty."
    if sprite.cells.is_empty():
        return False, f"Sprite '{sprite.name}' covers no cells."
    bounds = sheet.grid.bounds
    # Half-open: the last selected cell is max - 1.
    last_cell = sprite.cells.max - Vec2i.splat(1)
    if not (bounds.contains_point(sprite.cells.min) and bounds.contains_point(last_cell)):
        return False, f"Sprite '{sprite.name}' lies outside the {bounds.max.x}x{bounds.max.y} grid."
    return True, ""


def validate_sheet(sheet: SpriteSheet) -> tuple[bool, str]:
    """Validate sheet metadata, grid and every sprite."""
    if not sheet.name.strip():
        return False, "Sheet name cannot be empty."
    if not sheet.atlas_path.strip():
        return False, "Sheet atlas path cannot be empty."
    if sheet.grid.cells.x < 1 or sheet.grid.cells.y < 1:
        return False, "Sheet grid must have at least one cell per axis."
    seen: set[str] = set()
    for sprite in sheet.sprites:
        if sprite.name in seen:
            return False, f"Duplicate sprite name '{sprite.name}'."
        seen.add(sprite.name)
        valid, reason = validate_sprite(sheet, sprite)
        if not valid:
            return False, reason
    return True, ""
