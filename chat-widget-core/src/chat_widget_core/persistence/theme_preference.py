from loguru import logger

from chat_widget_core.conversation.data_models.theme import Theme, effective_is_dark
from chat_widget_core.persistence.base import THEME_KEY, KeyValueStore

DEFAULT_THEME = Theme.SYSTEM


class ThemePreference:
    """Stored display theme. Independent of the session, so it survives logout."""

    def __init__(self, store: KeyValueStore, key: str = THEME_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> Theme | None:
        raw = self.store.get(self.key)
        if raw is None:
            return None
        try:
            return Theme(raw)
        except ValueError:
            logger.warning(f"Discarding unknown persisted theme {raw!r} under {self.key!r}")
            return None

    def resolve(self) -> Theme:
        return self.load() or DEFAULT_THEME

    def save(self, theme: Theme) -> None:
        self.store.set(self.key, Theme(theme).value)

    @staticmethod
    def effective_is_dark(theme: Theme, system_prefers_dark: bool) -> bool:
        return effective_is_dark(theme, system_prefers_dark)
