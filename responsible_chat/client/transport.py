"""HTTP transport for the chat backend.

Sends one ``POST /api/chat`` request per user turn and turns the response into
either the reply text or a ``ChatTransportError``. No retries: every failure is
terminal for that turn.
"""

import json
import logging

import httpx
from pydantic import ValidationError

from responsible_chat.client.config import ClientConfig, get_client_config
from responsible_chat.client.errors import (
    MalformedResponse,
    NetworkFailure,
    ServerError,
)
from responsible_chat.models.schemas import ChatReply, ChatRequest, ErrorBody

logger = logging.getLogger(__name__)

CHAT_PATH = "/api/chat"
GENERIC_FAILURE = "Failed"


def _describe_detail(detail: object | None) -> str:
    """Render a server ``detail`` value as user-facing text."""
    if isinstance(detail, str):
        return detail or GENERIC_FAILURE
    if detail:
        return json.dumps(detail)
    return GENERIC_FAILURE


class ChatTransport:
    """Client for the remote chat endpoint.

    Args:
        config: Backend settings. Defaults to the process-wide config.
        transport: Optional httpx transport, e.g. ``ASGITransport`` to talk to
            an in-process app or ``MockTransport`` in tests.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self._config.backend_url}{CHAT_PATH}"

    async def send(self, text: str) -> str:
        """Send a user turn and return the assistant reply verbatim.

        Args:
            text: Non-empty, already-trimmed user text.

        Returns:
            The ``reply`` field of the backend response.

        Raises:
            NetworkFailure: The request could not be completed.
            MalformedResponse: The body is not JSON or has no string ``reply``.
            ServerError: The backend returned a non-2xx status.
        """
        payload = ChatRequest(message=text)

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self.endpoint, json=payload.model_dump())
            except httpx.RequestError as e:
                logger.warning(f"Chat request to {self.endpoint} failed: {e!r}")
                raise NetworkFailure(str(e) or type(e).__name__) from e

        # The body is decoded before the status is checked, so an unparseable
        # error page surfaces the parser message rather than the status.
        try:
            data = response.json()
        except ValueError as e:
            logger.warning(
                f"Non-JSON response from {self.endpoint} (HTTP {response.status_code})"
            )
            raise MalformedResponse(str(e)) from e

        if not response.is_success:
            detail = ErrorBody.model_validate(data).detail if isinstance(data, dict) else None
            message = _describe_detail(detail)
            logger.warning(f"Chat backend returned HTTP {response.status_code}: {message}")
            raise ServerError(message, status_code=response.status_code, detail=detail)

        try:
            reply = ChatReply.model_validate(data)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or "body"
            raise MalformedResponse(f"Invalid response {field}: {error['msg']}") from e

        logger.debug(f"Received reply ({len(reply.reply)} chars)")
        return reply.reply
