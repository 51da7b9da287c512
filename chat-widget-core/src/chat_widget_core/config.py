"""
Runtime configuration for the chat widget core.

'ChatWidgetSettings' collects every knob the embedding application may turn.
'from_env' reads them from environment variables:

    CHAT_WEBHOOK_URL        webhook endpoint; empty or PLACEHOLDER_URL -> simulation mode
    CHAT_WEBHOOK_TIMEOUT    request timeout in seconds (unset -> httpx default)
    CHAT_SIMULATION_DELAY   seconds the simulated reply waits (default 1.5)
    CHAT_STATE_PATH         JSON file holding the persisted session and theme
    CHAT_GREETING           text of the greeting that seeds every timeline

Values are validated by pydantic, so a malformed number fails at startup rather
than on the first turn.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from chat_widget_core.persistence.json_file import default_state_path

PLACEHOLDER_URL = "PLACEHOLDER_URL"

INITIAL_GREETING = "Hello! 👋 I'm your virtual assistant. How can I help you today?"


class ChatWidgetSettings(BaseModel):
    webhook_url: str = PLACEHOLDER_URL
    webhook_timeout: float | None = Field(default=None, gt=0)
    simulation_delay: float = Field(default=1.5, ge=0)
    state_path: Path = Field(default_factory=default_state_path)
    greeting: str = INITIAL_GREETING

    @property
    def simulation_enabled(self) -> bool:
        url = self.webhook_url.strip()
        return not url or url == PLACEHOLDER_URL

    @classmethod
    def from_env(cls) -> "ChatWidgetSettings":
        values: dict[str, str] = {}
        for field_name, variable in (
            ("webhook_url", "CHAT_WEBHOOK_URL"),
            ("webhook_timeout", "CHAT_WEBHOOK_TIMEOUT"),
            ("simulation_delay", "CHAT_SIMULATION_DELAY"),
            ("state_path", "CHAT_STATE_PATH"),
            ("greeting", "CHAT_GREETING"),
        ):
            value = os.environ.get(variable)
            if value:
                values[field_name] = value
        return cls.model_validate(values)
