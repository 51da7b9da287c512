"""
Reaction data model.

A reaction is a per-emoji counter attached to a message. 'user_reacted' records
whether the current local session contributed one unit to 'count'; there is no
multi-user reconciliation, so the counter is a local approximation of a shared
one. Entries are created and removed exclusively by
'conversation.reactions.toggle_reaction'.
"""

from pydantic import BaseModel, Field

AVAILABLE_REACTIONS: tuple[str, ...] = ("👍", "❤️", "😂", "😮", "😢", "🔥")


class Reaction(BaseModel):
    """A single emoji counter on a message."""

    emoji: str = Field(min_length=1)
    count: int = Field(ge=1)
    user_reacted: bool = False
