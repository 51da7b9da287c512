"""
Conversation timeline.

'MessageTimeline' exclusively owns the ordered list of messages shown in the
widget. Messages are appended in turn order and never deleted one by one; the
only way to drop history is 'reset', which replaces everything with a single
seed message (the greeting shown on login, logout and "clear conversation").
"""

from loguru import logger

from chat_widget_core.conversation.data_models.message import Message
from chat_widget_core.conversation.reactions import toggle_reaction


class DuplicateMessageError(ValueError):
    pass


class MessageNotFoundError(KeyError):
    pass


class MessageTimeline:
    def __init__(self, seed: Message | None = None) -> None:
        self._messages: list[Message] = []
        if seed is not None:
            self._messages.append(seed)

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def append(self, message: Message) -> None:
        if any(existing.id == message.id for existing in self._messages):
            raise DuplicateMessageError(f"Message with id {message.id} already in timeline")
        self._messages.append(message)

    def reset(self, seed: Message) -> None:
        logger.debug(f"Timeline reset, dropping {len(self._messages)} messages")
        self._messages = [seed]

    def get(self, message_id: str) -> Message:
        for message in self._messages:
            if message.id == message_id:
                return message
        raise MessageNotFoundError(f"Message with id {message_id} not found")

    def toggle_reaction(self, message_id: str, emoji: str) -> Message:
        """Replace the message with a copy whose reactions went through one toggle."""
        for index, message in enumerate(self._messages):
            if message.id == message_id:
                updated = message.model_copy(update={"reactions": toggle_reaction(message.reactions, emoji)})
                self._messages[index] = updated
                return updated
        raise MessageNotFoundError(f"Message with id {message_id} not found")
