"""Preference store persisted as a single JSON object on disk."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFilePreferenceStore:
    """Stores preferences in a JSON file, rewritten on every ``set_item``.

    A missing file reads as empty. A corrupt file is logged and also treated
    as empty; the next write replaces it.

    Args:
        path: Location of the JSON file. Parent directories are created on
            first write.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(items, indent=2, ensure_ascii=False), encoding="utf-8")

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning(f"Could not read preferences from {self._path}, starting empty")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Preferences file {self._path} is not a JSON object, starting empty")
            return {}
        return data
