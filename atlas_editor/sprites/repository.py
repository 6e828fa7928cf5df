"""Persistence layer for loading/saving sprite sheets."""

from __future__ import annotations

import logging
from pathlib import Path

from sprite_engine.diagnostics.json_codec import dumps_bytes, loads
from sprite_engine.runtime.errors import RECOVERABLE_IO_ERRORS, log_recoverable

logger = logging.getLogger(__name__)


class SpriteSheetRepository:
    """JSON file repository for sprite sheet documents."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def list_names(self) -> list[str]:
        """List available sheet names."""
        names: list[str] = []
        for path in self._root.glob("*.json"):
            ui_name = self._read_ui_name(path)
            names.append(ui_name or path.stem)
        return sorted(names, key=str.lower)

    def load_payload(self, name: str) -> dict[str, object]:
        """Load sheet payload by name."""
        path = self._path_for_ui_name(name)
        if path is None:
            raise FileNotFoundError(f"Sprite sheet '{name}' not found.")
        payload = loads(path.read_bytes())
        if not isinstance(payload, dict):
            raise ValueError(f"Sprite sheet '{name}' is not a JSON object.")
        return payload

    def save_payload(self, name: str, payload: dict[str, object]) -> Path:
        """Save sheet payload by name and return the file written."""
        ui_name = _validate_ui_name(name)
        path = self._path_for_ui_name(ui_name, missing_ok=True)
        if path is None:
            path = self._allocate_path(ui_name)
        path.write_bytes(dumps_bytes(payload, pretty=True))
        logger.info("sprite_sheet_saved name=%s path=%s", ui_name, path)
        return path

    def delete(self, name: str) -> None:
        """Delete sheet by name if it exists."""
        path = self._path_for_ui_name(name, missing_ok=True)
        if path is not None and path.exists():
            path.unlink()
            logger.info("sprite_sheet_deleted name=%s path=%s", name, path)

    def rename(self, old_name: str, new_name: str) -> None:
        """Rename a sheet; the file keeps its path, the stored name changes."""
        old_ui = _validate_ui_name(old_name)
        new_ui = _validate_ui_name(new_name)
        old_path = self._path_for_ui_name(old_ui, missing_ok=True)
        if old_path is None or not old_path.exists():
            raise FileNotFoundError(f"Sprite sheet '{old_name}' not found.")
        existing_new = self._path_for_ui_name(new_ui, missing_ok=True)
        if existing_new is not None and existing_new != old_path:
            raise ValueError(f"Sprite sheet '{new_name}' already exists.")
        payload = loads(old_path.read_bytes())
        if isinstance(payload, dict):
            payload["name"] = new_ui
        old_path.write_bytes(dumps_bytes(payload, pretty=True))
        logger.info("sprite_sheet_renamed old=%s new=%s", old_ui, new_ui)

    def _path_for_ui_name(self, name: str, missing_ok: bool = False) -> Path | None:
        ui_name = _validate_ui_name(name)
        direct = self._root / f"{_normalize_for_filename(ui_name)}.json"
        if direct.exists() and self._read_ui_name(direct) in {ui_name, None}:
            return direct
        for path in self._root.glob("*.json"):
            if self._read_ui_name(path) == ui_name:
                return path
        if missing_ok:
            return None
        raise FileNotFoundError(f"Sprite sheet '{ui_name}' not found.")

    def _allocate_path(self, ui_name: str) -> Path:
        base = _normalize_for_filename(ui_name)
        candidate = self._root / f"{base}.json"
        if not candidate.exists():
            return candidate
        index = 2
        while True:
            candidate = self._root / f"{base}_{index}.json"
            if not candidate.exists():
                return candidate
            index += 1

    @staticmethod
    def _read_ui_name(path: Path) -> str | None:
        try:
            payload = loads(path.read_bytes())
        except RECOVERABLE_IO_ERRORS:
            log_recoverable(logger, "sprite_sheet_unreadable path=%s", path)
            return None
        if not isinstance(payload, dict):
            return None
        value = payload.get("name")
        if isinstance(value, str):
            cleaned = value.strip()
            return cleaned or None
        return None


def _validate_ui_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValueError("Sprite sheet name cannot be empty.")
    return cleaned


def _normalize_for_filename(name: str) -> str:
    chars = [char if char.isalnum() or char in {"-", "_"} else "_" for char in name]
    normalized = "".join(chars).strip("_")
    return normalized or "sheet"
