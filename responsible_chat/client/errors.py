"""Exceptions raised by the chat transport.

``str(exc)`` is always the human-readable text shown to the user after the
``Error: `` prefix.
"""


class ChatTransportError(Exception):
    """Base class for failed chat turns."""

    pass


class NetworkFailure(ChatTransportError):
    """Raised when the request could not be completed (refused, DNS, timeout)."""

    pass


class ServerError(ChatTransportError):
    """Raised when the backend answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the backend.
        detail: The ``detail`` value from the response body, if any.
    """

    def __init__(self, message: str, status_code: int, detail: object | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class MalformedResponse(ChatTransportError):
    """Raised when the response body is not JSON or lacks a ``reply`` string."""

    pass
