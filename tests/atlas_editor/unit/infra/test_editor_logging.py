from __future__ import annotations

import logging

from atlas_editor.infra.logging import build_logging_config, setup_logging
from sprite_engine.diagnostics.json_codec import loads
from sprite_engine.runtime.logging import configure_engine_logging, shutdown_engine_logging


def test_build_logging_config_levels_and_formats(monkeypatch, isolated_app_data) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    config = build_logging_config()
    assert config.level_name == "WARNING"
    assert config.console_format == "json"
    assert config.file_format == "json"
    monkeypatch.setenv("ATLAS_EDITOR_LOG_LEVEL", "debug")
    assert build_logging_config().level_name == "DEBUG"


def test_build_logging_config_text_and_json(monkeypatch, isolated_app_data, restore_root_logging) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "text")
    configure_engine_logging(build_logging_config())
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert root.handlers
    monkeypatch.setenv("LOG_FORMAT", "json")
    configure_engine_logging(build_logging_config())
    assert root.handlers


def test_setup_logging_writes_under_app_data_logs(monkeypatch, isolated_app_data, restore_root_logging) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    setup_logging()

    logger = logging.getLogger("test.logging.file.path")
    logger.info("hello")
    shutdown_engine_logging()

    files = list((isolated_app_data / "logs").glob("atlas_editor_run_*.jsonl"))
    assert len(files) == 1
    records = [loads(line) for line in files[0].read_text(encoding="utf-8").splitlines()]
    assert records[0]["msg"].startswith("logging_file=")
    assert records[-1]["msg"] == "hello"


def test_log_dir_override(monkeypatch, isolated_app_data, tmp_path) -> None:
    custom = tmp_path / "custom_logs"
    monkeypatch.setenv("ATLAS_EDITOR_LOG_DIR", str(custom))
    config = build_logging_config()
    assert config.file_path is not None
    assert config.file_path.startswith(str(custom))
    assert custom.is_dir()
