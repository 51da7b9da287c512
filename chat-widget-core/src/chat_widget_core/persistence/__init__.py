from chat_widget_core.persistence.base import (
    SESSION_KEY,
    THEME_KEY,
    InMemoryKeyValueStore,
    KeyValueStore,
)
from chat_widget_core.persistence.json_file import JSONFileKeyValueStore, default_state_path
from chat_widget_core.persistence.session_store import SessionStore
from chat_widget_core.persistence.theme_preference import DEFAULT_THEME, ThemePreference

__all__ = [
    "DEFAULT_THEME",
    "SESSION_KEY",
    "THEME_KEY",
    "InMemoryKeyValueStore",
    "JSONFileKeyValueStore",
    "KeyValueStore",
    "SessionStore",
    "ThemePreference",
    "default_state_path",
]
