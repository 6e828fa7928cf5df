from __future__ import annotations

import logging

import pytest

from atlas_editor.core.grid import AtlasGrid
from atlas_editor.sprites.models import Sprite, SpriteSheet
from atlas_editor.sprites.repository import SpriteSheetRepository
from atlas_editor.sprites.service import SpriteSheetService
from sprite_engine.geometry import Aabb2i, Vec2i
from sprite_engine.runtime.logging import shutdown_engine_logging


def make_sample_sheet(name: str = "terrain") -> SpriteSheet:
    return SpriteSheet(
        name=name,
        atlas_path="textures/terrain.png",
        grid=AtlasGrid(cells=Vec2i(8, 4)),
        sprites=(
            Sprite("grass", Aabb2i.from_min_point(Vec2i(0, 0), Vec2i(1, 1))),
            Sprite("cliff", Aabb2i.new(Vec2i(2, 1), Vec2i(5, 3))),
        ),
    )


@pytest.fixture
def sample_sheet() -> SpriteSheet:
    return make_sample_sheet()


@pytest.fixture
def sheet_repository(tmp_path) -> SpriteSheetRepository:
    return SpriteSheetRepository(tmp_path / "sheets")


@pytest.fixture
def sheet_service(sheet_repository: SpriteSheetRepository) -> SpriteSheetService:
    return SpriteSheetService(sheet_repository)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        yield root
    finally:
        shutdown_engine_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


@pytest.fixture
def isolated_app_data(monkeypatch, tmp_path):
    """Point every editor path and env override at a scratch directory."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "ATLAS_EDITOR_APP_DATA_DIR",
        "ATLAS_EDITOR_SHEETS_DIR",
        "ATLAS_EDITOR_LOG_DIR",
        "ATLAS_EDITOR_LOG_LEVEL",
        "ATLAS_EDITOR_GRID_CELLS",
        "ATLAS_EDITOR_PREVIEW_SIZE",
        "ATLAS_EDITOR_PREVIEW_MIN_EXTENT",
        "ATLAS_EDITOR_PREVIEW_BACKGROUND",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    root = tmp_path / "appdata"
    monkeypatch.setenv("ATLAS_EDITOR_APP_DATA_DIR", str(root))
    return root
