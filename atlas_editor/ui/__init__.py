"""Render-free layout for editor widgets."""

from atlas_editor.ui.preview import PreviewImage, PreviewLayout, SpritePreview

__all__ = ["PreviewImage", "PreviewLayout", "SpritePreview"]
