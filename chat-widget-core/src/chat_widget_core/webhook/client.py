"""
Webhook clients.

A 'WebhookClient' performs one outbound exchange per user turn and returns the
reply text, or raises a 'ClassifiedError'. Two implementations exist:

'HTTPWebhookClient'      POSTs the turn to the configured automation endpoint.
'SimulatedWebhookClient' answers locally after a short delay; used when no real
                         endpoint is configured so the widget stays demonstrable.

'build_webhook_client' picks one from 'ChatWidgetSettings'. No retry is ever
attempted: a failed turn is reported once and the user can simply send again.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

import httpx
from loguru import logger

from chat_widget_core.config import ChatWidgetSettings
from chat_widget_core.conversation.data_models.session import Session
from chat_widget_core.utils.time import iso_timestamp
from chat_widget_core.webhook.errors import (
    ClassifiedError,
    NetworkUnreachableError,
    UnknownWebhookError,
    WebhookHTTPStatusError,
)
from chat_widget_core.webhook.resolvers import DEFAULT_RESOLVERS, ResponseResolver, resolve_reply


class WebhookClient(ABC):
    """Sends a single user turn and returns the automation's reply."""

    @abstractmethod
    async def send(self, text: str, session: Session | None) -> str:
        """Return the reply text for 'text' or raise 'ClassifiedError'."""
        pass


def build_payload(text: str, session: Session | None) -> dict[str, Any]:
    payload: dict[str, Any] = {"chatInput": text, "timestamp": iso_timestamp()}
    if session is not None:
        payload.update(session.identity_fields())
    return payload


class HTTPWebhookClient(WebhookClient):
    """
    Client for a real automation webhook.

    The response body is always read as text first and only then parsed, so a
    non-JSON reply is shown as-is instead of crashing the turn. Pass
    'http_client' to reuse a long-lived 'httpx.AsyncClient' (or one built over
    a mock transport); otherwise a client is opened for each request. Redirects
    are followed, and a configured 'timeout' overrides the client's own.
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        resolvers: Sequence[ResponseResolver] = DEFAULT_RESOLVERS,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.http_client = http_client
        self.resolvers = resolvers

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        request_kwargs: dict[str, Any] = {"json": payload, "follow_redirects": True}
        if self.timeout is not None:
            request_kwargs["timeout"] = self.timeout
        if self.http_client is not None:
            return await self.http_client.post(self.url, **request_kwargs)
        async with httpx.AsyncClient() as client:
            return await client.post(self.url, **request_kwargs)

    async def send(self, text: str, session: Session | None) -> str:
        payload = build_payload(text, session)
        logger.debug(f"POST {self.url} chatInput={text[:80]!r} session={payload.get('sessionId')}")
        try:
            response = await self._post(payload)
            if not response.is_success:
                raise WebhookHTTPStatusError(response.status_code)
            reply = resolve_reply(response.text, self.resolvers)
        except ClassifiedError as exc:
            logger.warning(f"Webhook turn failed ({exc.kind}): {exc}")
            raise
        except httpx.TransportError as exc:
            logger.warning(f"Webhook unreachable at {self.url}: {exc!r}")
            raise NetworkUnreachableError(self.url) from exc
        except Exception as exc:
            logger.exception("Unexpected failure while calling the webhook")
            raise UnknownWebhookError.from_exception(exc) from exc

        logger.debug(f"Webhook replied with {len(reply)} characters")
        return reply


class SimulatedWebhookClient(WebhookClient):
    """Stand-in used when no endpoint is configured. Never fails."""

    def __init__(self, delay: float = 1.5) -> None:
        self.delay = delay

    async def send(self, text: str, session: Session | None) -> str:
        await asyncio.sleep(self.delay)
        return (
            f'Simulation: I received your message: "{text}".\n\n'
            "To talk to a real automation, set CHAT_WEBHOOK_URL to the production URL of your webhook."
        )


def build_webhook_client(
    settings: ChatWidgetSettings,
    http_client: httpx.AsyncClient | None = None,
) -> WebhookClient:
    if settings.simulation_enabled:
        logger.info(f"No webhook configured, using simulation mode (delay={settings.simulation_delay}s)")
        return SimulatedWebhookClient(delay=settings.simulation_delay)
    logger.info(f"Webhook client: {settings.webhook_url}")
    return HTTPWebhookClient(settings.webhook_url, timeout=settings.webhook_timeout, http_client=http_client)
