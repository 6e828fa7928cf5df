"""Engine-wide debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable runtime debug configuration."""

    selection_trace_enabled: bool
    preview_trace_enabled: bool
    log_level: str


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve runtime log level with engine-prefixed override."""
    value = os.getenv("ENGINE_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        selection_trace_enabled=_flag("ENGINE_DEBUG_SELECTION_TRACE", False),
        preview_trace_enabled=_flag("ENGINE_DEBUG_PREVIEW_TRACE", False),
        log_level=resolve_log_level_name(),
    )


def enabled_selection_trace() -> bool:
    return load_debug_config().selection_trace_enabled


def enabled_preview_trace() -> bool:
    return load_debug_config().preview_trace_enabled
