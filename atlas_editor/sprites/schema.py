"""Sprite sheet payload schema."""

from __future__ import annotations

from atlas_editor.core.grid import AtlasGrid
from atlas_editor.sprites.models import Sprite, SpriteSheet
from sprite_engine.geometry.codec import (
    aabb2i_to_payload,
    payload_to_aabb2i,
    payload_to_vec2i,
    vec2i_to_payload,
)

SCHEMA_VERSION = 1


def sheet_to_payload(sheet: SpriteSheet) -> dict[str, object]:
    """Convert a sprite sheet to a JSON-serializable payload."""
    return {
        "version": SCHEMA_VERSION,
        "name": sheet.name,
        "atlas": sheet.atlas_path,
        "grid": vec2i_to_payload(sheet.grid.cells),
        "sprites": [
            {"name": sprite.name, "cells": aabb2i_to_payload(sprite.cells)}
            for sprite in sheet.sprites
        ],
    }


def payload_to_sheet(payload: dict[str, object]) -> SpriteSheet:
    """Convert a loaded payload into a sprite sheet."""
    raw_version = payload.get("version", -1)
    if not isinstance(raw_version, (int, str)):
        raise ValueError("Sheet version must be int-compatible.")
    try:
        version = int(raw_version)
    except ValueError as exc:
        raise ValueError("Sheet version must be int-compatible.") from exc
    if version != SCHEMA_VERSION:
        raise ValueError("Unsupported sprite sheet version.")

    name = str(payload.get("name", "")).strip()
    if not name:
        raise ValueError("Sheet name is required.")
    atlas_path = str(payload.get("atlas", "")).strip()
    if not atlas_path:
        raise ValueError("Sheet atlas path is required.")
    try:
        cells = payload_to_vec2i(payload.get("grid"))
    except ValueError as exc:
        raise ValueError("Sheet grid must be an {x, y} object of integers.") from exc

    raw_sprites = payload.get("sprites", [])
    if not isinstance(raw_sprites, list):
        raise ValueError("Sheet sprites must be a list.")
    sprites: list[Sprite] = []
    for item in raw_sprites:
        if not isinstance(item, dict):
            raise ValueError("Each sprite must be an object.")
        sprite_name = item.get("name")
        if not isinstance(sprite_name, str) or not sprite_name.strip():
            raise ValueError("Each sprite needs a non-empty name.")
        try:
            sprite_cells = payload_to_aabb2i(item.get("cells"))
        except ValueError as exc:
            raise ValueError(f"Malformed cell range for sprite '{sprite_name}'.") from exc
        sprites.append(Sprite(name=sprite_name.strip(), cells=sprite_cells))
    return SpriteSheet(
        name=name,
        atlas_path=atlas_path,
        grid=AtlasGrid(cells=cells),
        sprites=tuple(sprites),
    )
