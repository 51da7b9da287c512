"""
JSON file backend for the key-value port.

All keys live in one JSON object on disk. A missing or corrupt file reads as an
empty store so a damaged state file never prevents the widget from starting.
Writes go to a temporary file that is then renamed over the target, so a crash
mid-write leaves the previous state intact.
"""

import json
import os
import tempfile
from pathlib import Path

from loguru import logger

from chat_widget_core.persistence.base import KeyValueStore


def default_state_path() -> Path:
    """'$XDG_CONFIG_HOME/botlab-chat/state.json', with '~/.config' as fallback."""
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "botlab-chat" / "state.json"


class JSONFileKeyValueStore(KeyValueStore):
    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else default_state_path()

    def _load(self) -> dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (ValueError, OSError) as exc:  # ValueError covers bad JSON and bad UTF-8
            logger.warning(f"Ignoring unreadable state file {self.path}: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring state file {self.path}: expected a JSON object")
            return {}
        return {key: value for key, value in data.items() if isinstance(value, str)}

    def _save(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)
