"""Sprite preview layout: what the preview widget should draw, as plain values."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from atlas_editor.core.color import normalize_hex_color
from atlas_editor.core.grid import AtlasGrid, full_uv
from sprite_engine.geometry import Aabb2, Aabb2i, Vec2
from sprite_engine.runtime.debug_config import enabled_preview_trace

logger = logging.getLogger(__name__)

DEFAULT_MIN_DISPLAY_EXTENT = 0.01


def flip_y(uv: Vec2) -> Vec2:
    """Convert a top-down UV to the bottom-up convention of uploaded textures."""
    return Vec2(uv.x, 1.0 - uv.y)


@dataclass(frozen=True, slots=True)
class PreviewImage:
    """Texture quad stretched over the whole widget.

    ``uv_min``/``uv_max`` are the sampling coordinates for the widget's
    top-left and bottom-right corners, already flipped in y.
    """

    display_uv: Aabb2
    uv_min: Vec2
    uv_max: Vec2


@dataclass(frozen=True, slots=True)
class PreviewLayout:
    """Draw plan for one preview widget.

    ``selection`` is in widget space and may extend past ``widget`` when the
    selected cells lie outside the displayed range; renderers clip it to
    ``widget``.
    """

    widget: Aabb2
    background: str
    image: PreviewImage | None
    selection: Aabb2 | None


@dataclass(frozen=True, slots=True)
class SpritePreview:
    """Builder for a preview of part of an atlas."""

    grid: AtlasGrid
    size: Vec2 | None = None
    display_cells: Aabb2i | None = None
    selection_cells: Aabb2i | None = None
    background: str = "#000000"
    min_display_extent: float = DEFAULT_MIN_DISPLAY_EXTENT

    def widget_size(self, size: Vec2) -> SpritePreview:
        return replace(self, size=size)

    def display_range(self, cells: Aabb2i) -> SpritePreview:
        return replace(self, display_cells=cells)

    def selection_range(self, cells: Aabb2i) -> SpritePreview:
        return replace(self, selection_cells=cells)

    def background_color(self, color: str) -> SpritePreview:
        return replace(self, background=normalize_hex_color(color))

    def build(self, widget_pos: Vec2, available: Vec2) -> PreviewLayout:
        """Lay the preview out at ``widget_pos`` within ``available`` space.

        Without an explicit size the widget is the largest square that fits.
        A display range thinner than ``min_display_extent`` in UV on either
        axis yields a background-only layout.
        """
        size = self.size if self.size is not None else Vec2.splat(min(available.x, available.y))
        widget = Aabb2.new(widget_pos, widget_pos + size)

        if self.display_cells is None:
            display_uv = full_uv()
        else:
            display_uv = self.grid.cells_to_uv(self.display_cells)
        display_size = display_uv.size()
        if abs(display_size.x) < self.min_display_extent or abs(display_size.y) < self.min_display_extent:
            if enabled_preview_trace():
                logger.debug("preview_skipped_degenerate_display size=%s", display_size.to_tuple())
            return PreviewLayout(widget=widget, background=self.background, image=None, selection=None)

        image = PreviewImage(
            display_uv=display_uv,
            uv_min=flip_y(display_uv.min),
            uv_max=flip_y(display_uv.max),
        )
        selection: Aabb2 | None = None
        if self.selection_cells is not None and not self.selection_cells.is_empty():
            selection = self.grid.cells_to_widget(widget, display_uv, self.selection_cells)
        if enabled_preview_trace():
            logger.debug(
                "preview_layout widget=%s uv_min=%s uv_max=%s selected=%s",
                widget.size().to_tuple(),
                image.uv_min.to_tuple(),
                image.uv_max.to_tuple(),
                selection is not None,
            )
        return PreviewLayout(widget=widget, background=self.background, image=image, selection=selection)
