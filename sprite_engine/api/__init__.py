"""Public engine API surface."""

from sprite_engine.api.logging import EngineLoggingConfig, JsonFormatter, LoggerPort, get_logger

__all__ = ["EngineLoggingConfig", "JsonFormatter", "LoggerPort", "get_logger"]
