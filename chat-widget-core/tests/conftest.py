import asyncio
from collections.abc import Callable

import httpx
import pytest

from chat_widget_core.conversation.controller import ChatController
from chat_widget_core.conversation.data_models.session import Session
from chat_widget_core.persistence.base import InMemoryKeyValueStore
from chat_widget_core.persistence.session_store import SessionStore
from chat_widget_core.persistence.theme_preference import ThemePreference
from chat_widget_core.webhook.client import WebhookClient


class FakeWebhookClient(WebhookClient):
    """Records every call. Replies with 'reply' or raises 'error'; waits on 'gate' when given."""

    def __init__(self, reply: str = "Test fake reply", error: Exception | None = None, gate: asyncio.Event | None = None):
        self.reply = reply
        self.error = error
        self.gate = gate
        self.calls: list[tuple[str, Session | None]] = []

    async def send(self, text: str, session: Session | None) -> str:
        self.calls.append((text, session))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def fake_client() -> FakeWebhookClient:
    return FakeWebhookClient()


@pytest.fixture
def make_controller(store) -> Callable[..., ChatController]:
    def _make(client: WebhookClient, logged_in: bool = True) -> ChatController:
        controller = ChatController(client, SessionStore(store), ThemePreference(store), greeting="Hi there")
        if logged_in:
            controller.login("Ada Lovelace", "ada@example.com")
        return controller

    return _make


@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an 'httpx.AsyncClient' whose requests are answered by 'handler'."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
