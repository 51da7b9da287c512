"""
Chat controller (Facade).

'ChatController' is the single entry point presentation layers talk to. It owns
the timeline, the active session and the theme, and drives one turn at a time
against a 'WebhookClient':

    idle --send--> sending --reply or classified failure--> idle

Presentation layers issue intents ('send', 'toggle_reaction', 'login',
'logout', 'clear_conversation', 'set_theme') and read back the resulting state.
A failed turn never escapes as an exception: it becomes an error-flagged bot
message so the user always receives an answer.
"""

from enum import StrEnum

from loguru import logger

from chat_widget_core.config import INITIAL_GREETING
from chat_widget_core.conversation.data_models.message import Message
from chat_widget_core.conversation.data_models.session import Session
from chat_widget_core.conversation.data_models.theme import Theme
from chat_widget_core.conversation.timeline import MessageTimeline
from chat_widget_core.persistence.session_store import SessionStore
from chat_widget_core.persistence.theme_preference import ThemePreference
from chat_widget_core.webhook.client import WebhookClient
from chat_widget_core.webhook.errors import ClassifiedError, UnknownWebhookError


class ChatState(StrEnum):
    IDLE = "idle"
    SENDING = "sending"


class ChatController:
    def __init__(
        self,
        client: WebhookClient,
        session_store: SessionStore,
        theme_preference: ThemePreference,
        greeting: str = INITIAL_GREETING,
    ):
        self.client = client
        self.session_store = session_store
        self.theme_preference = theme_preference
        self.greeting = greeting

        self.state = ChatState.IDLE
        self.input_buffer = ""
        self.session: Session | None = session_store.load()
        self.theme: Theme = theme_preference.resolve()
        self.timeline = MessageTimeline(self._greeting_message())

    def _greeting_message(self) -> Message:
        return Message.from_bot(self.greeting)

    @property
    def is_busy(self) -> bool:
        return self.state is ChatState.SENDING

    @property
    def messages(self) -> tuple[Message, ...]:
        return self.timeline.messages

    def update_input(self, text: str) -> None:
        self.input_buffer = text

    async def send(self, text: str | None = None) -> Message | None:
        """
        Run one turn and return the bot message it produced.

        Uses the input buffer when 'text' is None. Returns None without side
        effects when the input is blank, no session is active, or another turn
        is still in flight. Also returns None when the session ends (logout)
        before the reply arrives; the reply is then discarded.
        """
        user_text = (self.input_buffer if text is None else text).strip()
        session = self.session
        if not user_text:
            return None
        if session is None:
            logger.debug("Ignoring send without an active session")
            return None
        if self.is_busy:
            logger.debug("Ignoring send while a turn is in flight")
            return None

        self.timeline.append(Message.from_user(user_text))
        self.input_buffer = ""
        self.state = ChatState.SENDING
        try:
            reply = Message.from_bot(await self.client.send(user_text, session))
        except ClassifiedError as exc:
            reply = Message.from_bot(exc.display_text, is_error=True)
        except Exception as exc:
            logger.exception("Webhook client raised an unclassified error")
            reply = Message.from_bot(UnknownWebhookError.from_exception(exc).display_text, is_error=True)
        finally:
            self.state = ChatState.IDLE

        if self.session is not session:
            # the session ended while the turn was in flight; its timeline is gone
            logger.info(f"Dropping reply for ended session {session.session_id}")
            return None
        self.timeline.append(reply)
        logger.info(f"Turn completed for session {session.session_id} (error={reply.is_error})")
        return reply

    def toggle_reaction(self, message_id: str, emoji: str) -> Message:
        return self.timeline.toggle_reaction(message_id, emoji)

    def login(self, name: str, email: str) -> Session:
        session = Session.create(name, email)
        self.session_store.save(session)
        self.session = session
        self.timeline.reset(self._greeting_message())
        logger.info(f"Session {session.session_id} started for {session.email}")
        return session

    def logout(self) -> None:
        if self.session is not None:
            logger.info(f"Session {self.session.session_id} ended")
        self.session_store.clear()
        self.session = None
        self.input_buffer = ""
        self.timeline.reset(self._greeting_message())

    def clear_conversation(self) -> None:
        self.timeline.reset(self._greeting_message())
        logger.info("Conversation cleared")

    def set_theme(self, theme: Theme) -> None:
        self.theme = Theme(theme)
        self.theme_preference.save(self.theme)

    def is_dark(self, system_prefers_dark: bool) -> bool:
        return self.theme_preference.effective_is_dark(self.theme, system_prefers_dark)
