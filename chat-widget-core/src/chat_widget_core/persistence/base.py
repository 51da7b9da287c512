"""
Key-value persistence port.

The widget persists two small values (theme and session) the way a browser
would keep them in local storage: string values under fixed keys. The
'KeyValueStore' ABC is the pluggable backend; 'SessionStore' and
'ThemePreference' only ever talk to this interface.

Concrete implementations: 'InMemoryKeyValueStore', 'JSONFileKeyValueStore'.
"""

from abc import ABC, abstractmethod

THEME_KEY = "chat-theme"
SESSION_KEY = "chat-session"


class KeyValueStore(ABC):
    """Abstract string key-value storage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove 'key'. Deleting a missing key is not an error."""
        pass


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
