"""Engine serialization helpers."""

from sprite_engine.diagnostics.json_codec import JSONDecodeError, dumps_bytes, dumps_text, loads

__all__ = ["JSONDecodeError", "dumps_bytes", "dumps_text", "loads"]
