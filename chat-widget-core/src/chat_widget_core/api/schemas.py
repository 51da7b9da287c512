"""
Request and response bodies of the intent API.

Wire names are camelCase to match what browser widgets already send and store
('sessionId', 'isError', 'userReacted'); the domain models stay snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from chat_widget_core.conversation.data_models.message import Message, Sender
from chat_widget_core.conversation.data_models.session import Session
from chat_widget_core.conversation.data_models.theme import Theme


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginInput(BaseModel):
    name: str
    email: str


class SendInput(BaseModel):
    text: str


class ReactionInput(BaseModel):
    emoji: str


class ThemeInput(BaseModel):
    theme: Theme


class ClientReaction(CamelModel):
    emoji: str
    count: int
    user_reacted: bool


class ClientMessage(CamelModel):
    id: str
    text: str
    sender: Sender
    timestamp: datetime
    is_error: bool
    reactions: list[ClientReaction]

    @classmethod
    def from_message(cls, message: Message) -> "ClientMessage":
        return cls.model_validate(message.model_dump())


class ClientSession(CamelModel):
    name: str
    email: str
    session_id: str

    @classmethod
    def from_session(cls, session: Session) -> "ClientSession":
        return cls(name=session.name, email=session.email, session_id=session.session_id)


class ClientTheme(CamelModel):
    theme: Theme
    is_dark: bool


class ClientState(CamelModel):
    state: str
    session: ClientSession | None
    theme: Theme
    messages: list[ClientMessage]
