"""Editor domain logic: grid mapping and selection gestures."""

from atlas_editor.core.grid import AtlasGrid, full_uv, reproject
from atlas_editor.core.selection import (
    PointerOutcome,
    SpriteEditorState,
    apply_pointer,
    begin_selection,
    clear_selection,
    drag_selection,
    end_selection,
    set_preview_background,
)

__all__ = [
    "AtlasGrid",
    "PointerOutcome",
    "SpriteEditorState",
    "apply_pointer",
    "begin_selection",
    "clear_selection",
    "drag_selection",
    "end_selection",
    "full_uv",
    "reproject",
    "set_preview_background",
]
