"""Atlas cell grid mapping between cell, UV and widget space."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from sprite_engine.geometry import Aabb2, Aabb2i, Vec2, Vec2i

DEFAULT_GRID_CELLS = 8


def reproject(point: Vec2, source: Aabb2, target: Aabb2) -> Vec2:
    """Carry a point from one box's frame into another's."""
    return target.map_from_percentage(source.map_to_percentage(point))


def full_uv() -> Aabb2:
    """UV range covering the whole texture."""
    return Aabb2.new(Vec2.zero(), Vec2.splat(1.0))


@dataclass(frozen=True, slots=True)
class AtlasGrid:
    """Uniform cell grid laid over an atlas texture.

    Cell ``(0, 0)`` is the top-left cell; y grows downward in cell, UV and
    widget space alike. Flipping for bottom-up textures happens at sampling
    time in the preview layout.
    """

    cells: Vec2i = field(default_factory=lambda: Vec2i.splat(DEFAULT_GRID_CELLS))

    @property
    def bounds(self) -> Aabb2i:
        """Half-open range of valid cell indices."""
        return Aabb2i.new(Vec2i.zero(), self.cells)

    def cell_space(self) -> Aabb2:
        return self.bounds.to_aabb2()

    def cells_to_uv(self, cells: Aabb2i) -> Aabb2:
        """UV range covered by a cell range."""
        space = self.cell_space()
        return Aabb2.new(
            space.map_to_percentage(cells.min.to_vec2()),
            space.map_to_percentage(cells.max.to_vec2()),
        )

    def uv_to_cell(self, uv: Vec2) -> Vec2i:
        """Cell containing a UV point. Not clamped to the grid."""
        position = self.cell_space().map_from_percentage(uv)
        return Vec2i(math.floor(position.x), math.floor(position.y))

    def cell_at(self, widget: Aabb2, point: Vec2) -> Vec2i | None:
        """Cell under a widget-space point, or None when outside the widget."""
        if widget.is_empty() or not widget.contains_point(point):
            return None
        cell = self.uv_to_cell(widget.map_to_percentage(point))
        # The closed widget edge at max maps to one past the last cell.
        if not self.bounds.contains_point(cell):
            return None
        return cell

    def cells_to_widget(self, widget: Aabb2, display_uv: Aabb2, cells: Aabb2i) -> Aabb2:
        """Widget-space rectangle of a cell range while ``display_uv`` fills the widget."""
        uv = self.cells_to_uv(cells)
        return Aabb2.new(
            reproject(uv.min, display_uv, widget),
            reproject(uv.max, display_uv, widget),
        )

    def cell_rect(self, widget: Aabb2, cell: Vec2i) -> Aabb2:
        """Widget-space outline of one cell with the whole atlas displayed."""
        return self.cells_to_widget(widget, full_uv(), Aabb2i.from_min_point(cell, Vec2i.splat(1)))
