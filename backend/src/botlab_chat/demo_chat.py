"""
Step-by-step demo of the chat widget core.

Each stage is an independent function so you can run and inspect a single step
without executing the whole turn. loguru logs the intermediate state at every
stage.

Usage
-----
Run end-to-end in simulation mode (no webhook configured):

    python -m botlab_chat.demo_chat

Talk to a real automation webhook:

    CHAT_WEBHOOK_URL=https://automation.example.com/webhook/chat \\
    python -m botlab_chat.demo_chat

Override the question or the identity at runtime:

    QUERY="What are your opening hours?" \\
    CHAT_USER_NAME="Ada" CHAT_USER_EMAIL="ada@example.com" \\
    python -m botlab_chat.demo_chat

Set LOG_LEVEL=DEBUG to see the outbound payload and reply sizes.

State
-----
The session and theme are persisted in the JSON state file (CHAT_STATE_PATH,
default $XDG_CONFIG_HOME/botlab-chat/state.json). Running the demo twice
reuses the stored session; set LOGOUT=1 to end it after the run.

Steps at a glance
-----------------
1  step1_login()       : Create and persist a session (or reuse the stored one).
2  step2_send()        : Relay one user turn to the webhook.
3  step3_react()       : Toggle a reaction on the bot reply.
4  inspect_timeline()  : Print every message with its reactions.
"""

import asyncio
import os
import sys

from loguru import logger

from chat_widget_core.config import ChatWidgetSettings
from chat_widget_core.conversation.controller import ChatController
from chat_widget_core.conversation.data_models.message import Message
from chat_widget_core.conversation.data_models.session import Session
from chat_widget_core.persistence.base import KeyValueStore
from chat_widget_core.persistence.json_file import JSONFileKeyValueStore
from chat_widget_core.persistence.session_store import SessionStore
from chat_widget_core.persistence.theme_preference import ThemePreference
from chat_widget_core.webhook.client import build_webhook_client

DEFAULT_QUERY = "Hello! What can you do for me?"
DEFAULT_NAME = "Demo User"
DEFAULT_EMAIL = "demo@example.com"
DEFAULT_REACTION = "👍"


def build_settings() -> ChatWidgetSettings:
    """Read 'ChatWidgetSettings' from the environment and log the effective mode."""
    settings = ChatWidgetSettings.from_env()
    mode = "simulation" if settings.simulation_enabled else settings.webhook_url
    logger.info(f"Settings: webhook={mode!r}  state_path={str(settings.state_path)!r}")
    return settings


def build_controller(settings: ChatWidgetSettings, store: KeyValueStore | None = None) -> ChatController:
    """Wire the controller. Pass 'store' to keep state somewhere other than the JSON file."""
    store = store if store is not None else JSONFileKeyValueStore(settings.state_path)
    return ChatController(
        client=build_webhook_client(settings),
        session_store=SessionStore(store),
        theme_preference=ThemePreference(store),
        greeting=settings.greeting,
    )


# ---------------------------------------------------------------------------
# Step 1: Session
# ---------------------------------------------------------------------------
def step1_login(controller: ChatController, name: str, email: str) -> Session:
    """Reuse the persisted session when there is one, otherwise log in."""
    if controller.session is not None:
        logger.info(f"[Step 1] Reusing stored session {controller.session.session_id} ({controller.session.email})")
        return controller.session
    session = controller.login(name, email)
    logger.info(f"[Step 1] Logged in as {session.name!r} <{session.email}>")
    return session


# ---------------------------------------------------------------------------
# Step 2: One turn against the webhook
# ---------------------------------------------------------------------------
async def step2_send(controller: ChatController, query: str) -> Message | None:
    """Send 'query' and log the reply. Failed turns come back as error-flagged messages."""
    logger.info(f"[Step 2] Sending: {query!r}")
    controller.update_input(query)
    reply = await controller.send()
    if reply is None:
        logger.warning("[Step 2] Nothing was sent (blank input or no active session)")
        return None
    label = "Error reply" if reply.is_error else "Reply"
    logger.info(f"[Step 2] {label}:")
    logger.info(f"  {reply.text}")
    return reply


# ---------------------------------------------------------------------------
# Step 3: Reactions
# ---------------------------------------------------------------------------
def step3_react(controller: ChatController, message: Message, emoji: str = DEFAULT_REACTION) -> Message:
    updated = controller.toggle_reaction(message.id, emoji)
    summary = ", ".join(f"{r.emoji}x{r.count}" for r in updated.reactions) or "none"
    logger.info(f"[Step 3] Reactions on {message.id}: {summary}")
    return updated


def inspect_timeline(controller: ChatController) -> None:
    logger.info(f"--- Timeline ({len(controller.messages)} messages) ---")
    for message in controller.messages:
        flag = " [error]" if message.is_error else ""
        reactions = " ".join(f"{r.emoji}{r.count}{'*' if r.user_reacted else ''}" for r in message.reactions)
        logger.info(f"{message.timestamp:%H:%M} {message.sender.value:>4}{flag}: {message.text[:200]!r} {reactions}")


# ---------------------------------------------------------------------------
# End-to-end demo
# ---------------------------------------------------------------------------
async def run_demo(
    query: str = DEFAULT_QUERY,
    name: str = DEFAULT_NAME,
    email: str = DEFAULT_EMAIL,
    logout: bool = False,
    store: KeyValueStore | None = None,
) -> ChatController:
    """Run all steps and return the controller so callers can inspect the final state.

    Args:
        query:  The user text relayed to the webhook.
        name:   Display name used when no session is stored yet.
        email:  Email used when no session is stored yet.
        logout: End the session (and clear the timeline) after the run.
        store:  Key-value backend; defaults to the JSON state file.
    """
    logger.info("======= Chat widget demo: start =======")
    settings = build_settings()
    controller = build_controller(settings, store)

    step1_login(controller, name, email)
    reply = await step2_send(controller, query)
    if reply is not None:
        step3_react(controller, reply)
    inspect_timeline(controller)

    if logout:
        controller.logout()
        logger.info("Logged out, timeline reset to the greeting")

    logger.info("======= Chat widget demo: done =======")
    return controller


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, level=os.getenv("LOG_LEVEL", "INFO"))
    asyncio.run(
        run_demo(
            query=os.getenv("QUERY", DEFAULT_QUERY),
            name=os.getenv("CHAT_USER_NAME", DEFAULT_NAME),
            email=os.getenv("CHAT_USER_EMAIL", DEFAULT_EMAIL),
            logout=os.getenv("LOGOUT", "0") == "1",
        )
    )
