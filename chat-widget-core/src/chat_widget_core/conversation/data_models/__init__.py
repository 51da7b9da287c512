from chat_widget_core.conversation.data_models.message import Message, Sender
from chat_widget_core.conversation.data_models.reaction import AVAILABLE_REACTIONS, Reaction
from chat_widget_core.conversation.data_models.session import Session
from chat_widget_core.conversation.data_models.theme import Theme, effective_is_dark

__all__ = [
    "AVAILABLE_REACTIONS",
    "Message",
    "Reaction",
    "Sender",
    "Session",
    "Theme",
    "effective_is_dark",
]
