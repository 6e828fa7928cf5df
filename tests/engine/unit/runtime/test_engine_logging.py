from __future__ import annotations

import logging
from logging.handlers import QueueHandler

from sprite_engine.api.logging import EngineLoggingConfig
from sprite_engine.diagnostics.json_codec import loads
from sprite_engine.runtime.logging import (
    configure_engine_logging,
    get_engine_logger,
    setup_engine_logging,
    shutdown_engine_logging,
)


def test_setup_engine_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("ENGINE_LOG_LEVEL", "DEBUG")
        setup_engine_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_engine_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_engine_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_engine_logging_streams_json_lines_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "run.jsonl"
    try:
        configure_engine_logging(
            EngineLoggingConfig(level_name="info", file_path=str(log_file), file_format="json")
        )
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], QueueHandler)

        get_engine_logger("test.engine.file").info("cells=%s", 4, extra={"sheet": "tiles"})
        get_engine_logger("test.engine.file").debug("filtered")
        shutdown_engine_logging()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        record = loads(lines[0])
        assert record["msg"] == "cells=4"
        assert record["level"] == "INFO"
        assert record["logger"] == "test.engine.file"
        assert record["fields"] == {"sheet": "tiles"}
    finally:
        shutdown_engine_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_engine_logging_unknown_level_falls_back_to_info() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        configure_engine_logging(EngineLoggingConfig(level_name="chatty"))
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_shutdown_engine_logging_is_idempotent() -> None:
    shutdown_engine_logging()
    shutdown_engine_logging()
