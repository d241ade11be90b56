"""Chat backend client.

Responsibilities:
    - Backend configuration resolved once from the environment
    - One JSON request per user turn to ``/api/chat``
    - Mapping of network, status and parse failures to typed errors

Isolates the conversation store from wire format details.
"""

from responsible_chat.client.config import ClientConfig, get_client_config
from responsible_chat.client.errors import (
    ChatTransportError,
    MalformedResponse,
    NetworkFailure,
    ServerError,
)
from responsible_chat.client.transport import ChatTransport

__all__ = [
    "ChatTransport",
    "ChatTransportError",
    "ClientConfig",
    "MalformedResponse",
    "NetworkFailure",
    "ServerError",
    "get_client_config",
]
