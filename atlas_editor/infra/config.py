"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path

from atlas_editor.core.color import normalize_hex_color
from atlas_editor.core.grid import DEFAULT_GRID_CELLS
from atlas_editor.ui.preview import DEFAULT_MIN_DISPLAY_EXTENT
from sprite_engine.geometry import Vec2i


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Resolved editor settings."""

    grid_cells: Vec2i
    preview_size: float
    preview_min_extent: float
    preview_background: str


_EDITOR_CONFIG: ContextVar[EditorConfig | None] = ContextVar("atlas_editor_config", default=None)


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load split env files with optional local overrides.

    Later files win. Default order: appdata/config/.env.engine,
    appdata/config/.env.engine.local, appdata/config/.env.app,
    appdata/config/.env.app.local.
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.engine",
            "appdata/config/.env.engine.local",
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        value = float(raw.strip())
    except ValueError:
        return float(default)
    if value != value:  # NaN
        return float(default)
    return max(float(minimum), value)


def _grid_cells(raw: str | None) -> Vec2i:
    fallback = Vec2i.splat(DEFAULT_GRID_CELLS)
    if raw is None:
        return fallback
    normalized = raw.strip().lower().replace(" ", "")
    if not normalized:
        return fallback
    try:
        if "x" in normalized:
            left, right = normalized.split("x", 1)
            return Vec2i(max(1, int(left)), max(1, int(right)))
        return Vec2i.splat(max(1, int(normalized)))
    except ValueError:
        return fallback


def _color(raw: str | None, default: str) -> str:
    if raw is None or not raw.strip():
        return default
    try:
        return normalize_hex_color(raw)
    except ValueError:
        return default


def load_editor_config(*, env: Mapping[str, str] | None = None) -> EditorConfig:
    """Build editor settings from the environment; bad values fall back to defaults."""
    return EditorConfig(
        grid_cells=_grid_cells(_raw("ATLAS_EDITOR_GRID_CELLS", env=env)),
        preview_size=_float("ATLAS_EDITOR_PREVIEW_SIZE", 128.0, minimum=1.0, env=env),
        preview_min_extent=_float(
            "ATLAS_EDITOR_PREVIEW_MIN_EXTENT", DEFAULT_MIN_DISPLAY_EXTENT, minimum=0.0, env=env
        ),
        preview_background=_color(_raw("ATLAS_EDITOR_PREVIEW_BACKGROUND", env=env), "#000000"),
    )


def set_editor_config(config: EditorConfig) -> EditorConfig:
    _EDITOR_CONFIG.set(config)
    return config


def get_editor_config() -> EditorConfig:
    config = _EDITOR_CONFIG.get()
    if config is not None:
        return config
    return set_editor_config(load_editor_config())
