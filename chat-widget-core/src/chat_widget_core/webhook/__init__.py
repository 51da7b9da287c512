"""
Outbound side of a chat turn: the webhook clients, the reply resolvers and the
classified errors they raise.

    from chat_widget_core.webhook import build_webhook_client, ClassifiedError
"""

from chat_widget_core.webhook.client import (
    HTTPWebhookClient,
    SimulatedWebhookClient,
    WebhookClient,
    build_payload,
    build_webhook_client,
)
from chat_widget_core.webhook.errors import (
    ClassifiedError,
    ErrorKind,
    InvalidResponseError,
    NetworkUnreachableError,
    UnknownWebhookError,
    WebhookHTTPStatusError,
)
from chat_widget_core.webhook.resolvers import (
    DEFAULT_RESOLVERS,
    FieldProbeResolver,
    PrettyJSONResolver,
    ResponseResolver,
    StringPayloadResolver,
    resolve_reply,
)

__all__ = [
    "DEFAULT_RESOLVERS",
    "ClassifiedError",
    "ErrorKind",
    "FieldProbeResolver",
    "HTTPWebhookClient",
    "InvalidResponseError",
    "NetworkUnreachableError",
    "PrettyJSONResolver",
    "ResponseResolver",
    "SimulatedWebhookClient",
    "StringPayloadResolver",
    "UnknownWebhookError",
    "WebhookClient",
    "WebhookHTTPStatusError",
    "build_payload",
    "build_webhook_client",
    "resolve_reply",
]
