"""
Message data model.

Messages are the turns of a conversation timeline. A message is created either
for the user's input or for the webhook's reply (which may be a flagged error
reply) and is never edited afterwards, except for its 'reactions' list which
the timeline replaces through 'toggle_reaction'.

Ids are random rather than time-derived so two messages created within the
same clock tick still get distinct ids.
"""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from chat_widget_core.conversation.data_models.reaction import Reaction
from chat_widget_core.utils.database import generate_uid
from chat_widget_core.utils.time import utc_now


class Sender(StrEnum):
    """Author of a message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """
    A single turn in the timeline.

    'is_error' marks bot messages that carry a classified webhook failure
    instead of a real reply, so presentation layers can style them apart.
    """

    id: str = Field(default_factory=generate_uid)
    text: str
    sender: Sender
    timestamp: datetime = Field(default_factory=utc_now)
    is_error: bool = False
    reactions: list[Reaction] = Field(default_factory=list)

    @classmethod
    def from_user(cls, text: str) -> "Message":
        return cls(text=text, sender=Sender.USER)

    @classmethod
    def from_bot(cls, text: str, is_error: bool = False) -> "Message":
        return cls(text=text, sender=Sender.BOT, is_error=is_error)
