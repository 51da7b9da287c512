"""
HTTP intent API.

'create_app' exposes one 'ChatController' to a browser widget (inline or
floating) as a small FastAPI application. Routes are a thin translation layer:
each one forwards a single intent to the controller and returns the resulting
state. The controller stays the only owner of timeline, session and theme.

The session gate is a dependency ('require_session') so that routes needing an
identity answer 401 before touching the controller.
"""

from fastapi import Depends, FastAPI, HTTPException, Query, Response, status
from pydantic import ValidationError

from chat_widget_core.api.schemas import (
    ClientMessage,
    ClientSession,
    ClientState,
    ClientTheme,
    LoginInput,
    ReactionInput,
    SendInput,
    ThemeInput,
)
from chat_widget_core.conversation.controller import ChatController
from chat_widget_core.conversation.data_models.reaction import AVAILABLE_REACTIONS
from chat_widget_core.conversation.data_models.session import Session
from chat_widget_core.conversation.timeline import MessageNotFoundError


def create_app(controller: ChatController) -> FastAPI:
    app = FastAPI(title="BotLab chat widget")
    app.state.controller = controller

    def require_session() -> Session:
        if controller.session is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No active session")
        return controller.session

    def snapshot() -> ClientState:
        return ClientState(
            state=controller.state.value,
            session=ClientSession.from_session(controller.session) if controller.session else None,
            theme=controller.theme,
            messages=[ClientMessage.from_message(m) for m in controller.messages],
        )

    @app.get("/state", response_model=ClientState)
    def get_state() -> ClientState:
        return snapshot()

    @app.post(
        "/session",
        response_model=ClientSession,
        status_code=status.HTTP_201_CREATED,
    )
    def login(body: LoginInput) -> ClientSession:
        try:
            session = controller.login(body.name, body.email)
        except ValidationError as exc:
            raise HTTPException(
                status_code=422,
                detail=[{"loc": e["loc"], "msg": e["msg"]} for e in exc.errors()],
            ) from exc
        return ClientSession.from_session(session)

    @app.delete("/session", status_code=status.HTTP_204_NO_CONTENT)
    def logout() -> Response:
        controller.logout()
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.post(
        "/messages",
        response_model=ClientMessage,
        status_code=status.HTTP_201_CREATED,
    )
    async def send_message(body: SendInput, _: Session = Depends(require_session)) -> ClientMessage:
        if not body.text.strip():
            raise HTTPException(status_code=422, detail="Message text is blank")
        if controller.is_busy:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="A message is already being sent")
        reply = await controller.send(body.text)
        if reply is None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Message was not sent")
        return ClientMessage.from_message(reply)

    @app.delete("/messages", status_code=status.HTTP_204_NO_CONTENT)
    def clear_conversation() -> Response:
        controller.clear_conversation()
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.post("/messages/{message_id}/reactions", response_model=ClientMessage)
    def toggle_reaction(message_id: str, body: ReactionInput) -> ClientMessage:
        try:
            message = controller.toggle_reaction(message_id, body.emoji)
        except MessageNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Message {message_id} not found") from exc
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return ClientMessage.from_message(message)

    @app.get("/reactions")
    def available_reactions() -> list[str]:
        return list(AVAILABLE_REACTIONS)

    @app.get("/theme", response_model=ClientTheme)
    def get_theme(system_prefers_dark: bool = Query(False, alias="systemPrefersDark")) -> ClientTheme:
        return ClientTheme(theme=controller.theme, is_dark=controller.is_dark(system_prefers_dark))

    @app.put("/theme", response_model=ClientTheme)
    def set_theme(body: ThemeInput, system_prefers_dark: bool = Query(False, alias="systemPrefersDark")) -> ClientTheme:
        controller.set_theme(body.theme)
        return ClientTheme(theme=controller.theme, is_dark=controller.is_dark(system_prefers_dark))

    return app
