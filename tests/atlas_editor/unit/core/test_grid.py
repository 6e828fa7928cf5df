from __future__ import annotations

import pytest

from atlas_editor.core.grid import AtlasGrid, full_uv, reproject
from sprite_engine.geometry import Aabb2, Aabb2i, Vec2, Vec2i


def _widget(x: float = 0.0, y: float = 0.0, size: float = 256.0) -> Aabb2:
    return Aabb2.new(Vec2(x, y), Vec2(x + size, y + size))


def test_default_grid_is_eight_by_eight() -> None:
    grid = AtlasGrid()
    assert grid.cells == Vec2i(8, 8)
    assert grid.bounds == Aabb2i.new(Vec2i.zero(), Vec2i(8, 8))


def test_reproject_between_frames() -> None:
    target = Aabb2.new(Vec2(10.0, 10.0), Vec2(20.0, 30.0))
    assert reproject(Vec2(0.5, 0.5), full_uv(), target) == Vec2(15.0, 20.0)


def test_cells_to_uv() -> None:
    uv = AtlasGrid().cells_to_uv(Aabb2i.new(Vec2i(2, 2), Vec2i(4, 6)))
    assert uv.min == Vec2(0.25, 0.25)
    assert uv.max == Vec2(0.5, 0.75)


def test_cells_to_uv_non_square_grid() -> None:
    uv = AtlasGrid(cells=Vec2i(4, 2)).cells_to_uv(Aabb2i.new(Vec2i(1, 1), Vec2i(2, 2)))
    assert uv.min == Vec2(0.25, 0.5)
    assert uv.max == Vec2(0.5, 1.0)


def test_uv_to_cell_floors_and_does_not_clamp() -> None:
    grid = AtlasGrid()
    assert grid.uv_to_cell(Vec2(0.999, 0.0)) == Vec2i(7, 0)
    assert grid.uv_to_cell(Vec2(-0.01, 1.5)) == Vec2i(-1, 12)


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        (Vec2(0.0, 0.0), Vec2i(0, 0)),
        (Vec2(33.0, 65.0), Vec2i(1, 2)),
        (Vec2(255.9, 255.9), Vec2i(7, 7)),
        (Vec2(256.0, 256.0), None),
        (Vec2(-1.0, 5.0), None),
        (Vec2(10.0, 300.0), None),
    ],
)
def test_cell_at(point: Vec2, expected: Vec2i | None) -> None:
    assert AtlasGrid().cell_at(_widget(), point) == expected


def test_cell_at_offset_widget() -> None:
    assert AtlasGrid().cell_at(_widget(100.0, 50.0), Vec2(132.0, 50.0)) == Vec2i(1, 0)


def test_cell_at_empty_widget_is_none() -> None:
    widget = Aabb2.new(Vec2(10.0, 10.0), Vec2(10.0, 50.0))
    assert AtlasGrid().cell_at(widget, Vec2(10.0, 20.0)) is None


def test_cells_to_widget_full_display() -> None:
    rect = AtlasGrid().cells_to_widget(
        _widget(100.0, 50.0), full_uv(), Aabb2i.new(Vec2i(1, 1), Vec2i(3, 2))
    )
    assert rect.min == Vec2(132.0, 82.0)
    assert rect.max == Vec2(196.0, 114.0)


def test_cells_to_widget_zoomed_display() -> None:
    grid = AtlasGrid()
    display_uv = grid.cells_to_uv(Aabb2i.new(Vec2i(4, 4), Vec2i(8, 8)))
    rect = grid.cells_to_widget(_widget(), display_uv, Aabb2i.new(Vec2i(6, 6), Vec2i(7, 7)))
    assert rect.min == Vec2(128.0, 128.0)
    assert rect.max == Vec2(192.0, 192.0)


def test_cell_rect() -> None:
    rect = AtlasGrid().cell_rect(_widget(), Vec2i(2, 3))
    assert rect.min == Vec2(64.0, 96.0)
    assert rect.max == Vec2(96.0, 128.0)


def test_cell_at_and_cell_rect_agree() -> None:
    grid = AtlasGrid(cells=Vec2i(16, 4))
    widget = _widget(12.0, 8.0, 320.0)
    cell = grid.cell_at(widget, Vec2(200.0, 170.0))
    assert cell is not None
    assert grid.cell_rect(widget, cell).contains_point(Vec2(200.0, 170.0))
