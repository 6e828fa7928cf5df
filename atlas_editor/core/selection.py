"""Cell selection state and pointer gestures for the atlas view."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from atlas_editor.core.color import normalize_hex_color
from atlas_editor.core.grid import AtlasGrid
from sprite_engine.geometry import Aabb2, Aabb2i, Vec2, Vec2i
from sprite_engine.runtime.debug_config import enabled_selection_trace

logger = logging.getLogger(__name__)

_SINGLE_CELL = Vec2i.splat(1)


@dataclass(frozen=True, slots=True)
class SpriteEditorState:
    """Editor selection state.

    ``anchor`` is the cell range where the current drag started; it is empty
    when no gesture is in progress.
    """

    selection: Aabb2i = field(default_factory=Aabb2i.new_empty)
    anchor: Aabb2i = field(default_factory=Aabb2i.new_empty)
    preview_background: str = "#000000"


@dataclass(frozen=True, slots=True)
class PointerOutcome:
    """Result of routing one frame of pointer input through the atlas view."""

    state: SpriteEditorState
    hovered_cell: Vec2i | None
    hover_rect: Aabb2 | None


def begin_selection(state: SpriteEditorState, cell: Vec2i) -> SpriteEditorState:
    """Select a single cell and make it the drag anchor."""
    selected = Aabb2i.from_min_point(cell, _SINGLE_CELL)
    if enabled_selection_trace():
        logger.debug("selection_begin cell=%s", cell.to_tuple())
    return replace(state, selection=selected, anchor=selected)


def drag_selection(state: SpriteEditorState, cell: Vec2i) -> SpriteEditorState:
    """Extend the selection to cover the anchor and the hovered cell."""
    if state.anchor.is_empty():
        return state
    selected = state.anchor.union(Aabb2i.from_min_point(cell, _SINGLE_CELL))
    if enabled_selection_trace():
        logger.debug(
            "selection_drag cell=%s min=%s max=%s",
            cell.to_tuple(),
            selected.min.to_tuple(),
            selected.max.to_tuple(),
        )
    return replace(state, selection=selected)


def end_selection(state: SpriteEditorState) -> SpriteEditorState:
    """Finish a drag gesture, keeping the selection."""
    return replace(state, anchor=Aabb2i.new_empty())


def clear_selection(state: SpriteEditorState) -> SpriteEditorState:
    return replace(state, selection=Aabb2i.new_empty(), anchor=Aabb2i.new_empty())


def set_preview_background(state: SpriteEditorState, color: str) -> SpriteEditorState:
    return replace(state, preview_background=normalize_hex_color(color))


def apply_pointer(
    state: SpriteEditorState,
    *,
    grid: AtlasGrid,
    widget: Aabb2,
    pointer: Vec2,
    clicked: bool,
    dragging: bool,
) -> PointerOutcome:
    """Route one frame of pointer input over the atlas widget.

    A click starts a new selection at the hovered cell; a drag extends it.
    Pointer positions outside the widget leave the state untouched.
    """
    cell = grid.cell_at(widget, pointer)
    if cell is None:
        return PointerOutcome(state=state, hovered_cell=None, hover_rect=None)
    if clicked:
        state = begin_selection(state, cell)
    elif dragging:
        state = drag_selection(state, cell)
    return PointerOutcome(state=state, hovered_cell=cell, hover_rect=grid.cell_rect(widget, cell))
