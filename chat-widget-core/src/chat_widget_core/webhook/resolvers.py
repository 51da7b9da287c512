"""
Best-effort resolution of webhook reply bodies.

Automation endpoints answer in many shapes: a bare JSON string, an object with
the reply under one of a few conventional keys, some other JSON value, or plain
text. 'resolve_reply' parses the raw body once and walks an ordered list of
'ResponseResolver' strategies; the first one that returns a value wins. Support
for a new shape is added by inserting a resolver, not by editing control flow.

Bodies that are not JSON are returned verbatim when non-blank. Only an empty
(or whitespace-only) non-JSON body is unusable.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from chat_widget_core.webhook.errors import InvalidResponseError

REPLY_FIELDS: tuple[str, ...] = ("output", "text", "message")


def pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


class ResponseResolver(ABC):
    """One strategy for turning a parsed body into reply text."""

    @abstractmethod
    def resolve(self, payload: Any) -> str | None:
        """Return the reply text, or None if this strategy does not apply."""
        pass


class StringPayloadResolver(ResponseResolver):
    def resolve(self, payload: Any) -> str | None:
        return payload if isinstance(payload, str) else None


class FieldProbeResolver(ResponseResolver):
    """
    Look up the reply under well-known keys of a JSON object.

    Keys are probed in order and the first truthy value wins. A non-string value
    (nested object, number) is rendered as pretty JSON so it is still shown.
    """

    def __init__(self, fields: Sequence[str] = REPLY_FIELDS) -> None:
        self.fields = tuple(fields)

    def resolve(self, payload: Any) -> str | None:
        if not isinstance(payload, dict):
            return None
        for field in self.fields:
            value = payload.get(field)
            if value:
                return value if isinstance(value, str) else pretty_json(value)
        return None


class PrettyJSONResolver(ResponseResolver):
    """Fallback: show the whole value so nothing is silently dropped."""

    def resolve(self, payload: Any) -> str | None:
        return pretty_json(payload)


DEFAULT_RESOLVERS: tuple[ResponseResolver, ...] = (
    StringPayloadResolver(),
    FieldProbeResolver(),
    PrettyJSONResolver(),
)


def resolve_reply(raw_text: str, resolvers: Sequence[ResponseResolver] = DEFAULT_RESOLVERS) -> str:
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError:
        if raw_text.strip():
            return raw_text
        raise InvalidResponseError()

    for resolver in resolvers:
        reply = resolver.resolve(payload)
        if reply is not None:
            return reply
    raise InvalidResponseError()
