"""App-level logging policy over the engine logging runtime."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from atlas_editor.infra.app_data import resolve_logs_dir
from sprite_engine.api.logging import EngineLoggingConfig, JsonFormatter
from sprite_engine.runtime.logging import configure_engine_logging

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> EngineLoggingConfig:
    """Resolve the editor's logging pipeline from the environment."""
    level_name = os.getenv("ATLAS_EDITOR_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
    console_format = os.getenv("LOG_FORMAT", "text").lower()
    return EngineLoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging via the engine logging runtime."""
    config = build_logging_config()
    configure_engine_logging(config)
    logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    configured = os.getenv("ATLAS_EDITOR_LOG_DIR", "").strip()
    base_dir = Path(configured) if configured else resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"atlas_editor_run_{stamp}.jsonl")

