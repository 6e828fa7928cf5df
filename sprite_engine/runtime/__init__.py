"""Engine runtime: logging wiring, debug config and error policy."""

from sprite_engine.runtime.debug_config import DebugConfig, load_debug_config, resolve_log_level_name
from sprite_engine.runtime.errors import RECOVERABLE_IO_ERRORS, log_recoverable
from sprite_engine.runtime.logging import (
    configure_engine_logging,
    get_engine_logger,
    setup_engine_logging,
    shutdown_engine_logging,
)

__all__ = [
    "DebugConfig",
    "RECOVERABLE_IO_ERRORS",
    "configure_engine_logging",
    "get_engine_logger",
    "load_debug_config",
    "log_recoverable",
    "resolve_log_level_name",
    "setup_engine_logging",
    "shutdown_engine_logging",
]
