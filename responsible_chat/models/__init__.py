"""Pydantic models for conversation state and the backend wire format.

Models:
    - Role: Message origin (user or assistant)
    - Message: Immutable transcript entry
    - ChatRequest: Outgoing ``/api/chat`` payload
    - ChatReply: Successful backend response
    - ErrorBody: Non-2xx backend response
"""

from responsible_chat.models.schemas import (
    WELCOME_MESSAGE,
    ChatReply,
    ChatRequest,
    ErrorBody,
    Message,
    Role,
)

__all__ = [
    "WELCOME_MESSAGE",
    "ChatReply",
    "ChatRequest",
    "ErrorBody",
    "Message",
    "Role",
]
