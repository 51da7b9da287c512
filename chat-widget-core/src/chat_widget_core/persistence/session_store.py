"""
Persistence of the user's session.

The stored session is the sole gate between the identity-collection view and
the conversation view, so 'load' must never fail the caller: anything that does
not validate as a 'Session' is logged and reported as absent.
"""

from loguru import logger
from pydantic import ValidationError

from chat_widget_core.conversation.data_models.session import Session
from chat_widget_core.persistence.base import SESSION_KEY, KeyValueStore


class SessionStore:
    def __init__(self, store: KeyValueStore, key: str = SESSION_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> Session | None:
        raw = self.store.get(self.key)
        if raw is None:
            return None
        try:
            return Session.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning(f"Discarding malformed persisted session under {self.key!r}: {exc}")
            return None

    def save(self, session: Session) -> None:
        self.store.set(self.key, session.model_dump_json(by_alias=True))

    def clear(self) -> None:
        self.store.delete(self.key)
