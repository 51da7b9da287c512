"""
Session data model.

The session is the locally persisted identity of the end user. It is created on
login, attached to every outbound webhook request and destroyed on logout. The
'session_id' is generated exactly once, in 'Session.create', and serialized as
'sessionId' so the persisted form matches what the webhook receives.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chat_widget_core.utils.database import generate_uid


class Session(BaseModel):
    """Identity of the person chatting through the widget."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    email: str
    session_id: str = Field(alias="sessionId", min_length=1)

    @field_validator("name", "email")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @classmethod
    def create(cls, name: str, email: str) -> "Session":
        return cls(name=name, email=email, session_id=generate_uid())

    def identity_fields(self) -> dict[str, str]:
        """Fields added to an outbound webhook payload."""
        return {"sessionId": self.session_id, "name": self.name, "email": self.email}
