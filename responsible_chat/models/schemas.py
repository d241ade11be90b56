from enum import Enum

from pydantic import BaseModel, ConfigDict

WELCOME_MESSAGE = "Welcome! I am your responsible AI assistant. Ask me anything."


class Role(str, Enum):
    """Origin of a message in the conversation."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single turn shown in the chat transcript.

    Messages are frozen: once appended to a conversation they never change.

    Attributes:
        role: Who produced the message (user or assistant).
        content: The displayed text. For failed turns this is a
            human-readable ``Error: ...`` description.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Request payload sent to the backend ``/api/chat`` endpoint.

    Attributes:
        message: The user text, sent as given.
    """

    message: str


class ChatReply(BaseModel):
    """Successful backend response. Extra fields are ignored.

    Attributes:
        reply: The assistant's answer, displayed verbatim.
    """

    reply: str


class ErrorBody(BaseModel):
    """Body of a non-2xx backend response.

    Attributes:
        detail: Server-provided error description, if any. FastAPI validation
            errors send a list here, so any JSON value is accepted.
    """

    detail: object | None = None
