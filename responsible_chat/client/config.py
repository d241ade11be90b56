"""Client configuration with environment variable loading.

Pydantic-based configuration for the chat transport and session store.
Values are resolved once per process via ``get_client_config``.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BACKEND_URL = "http://localhost:8000"


class ClientConfig(BaseModel):
    """Configuration for talking to the chat backend.

    Attributes:
        backend_url: Base URL of the chat service (``/api/chat`` is appended).
        request_timeout: Seconds before a request is abandoned (None = no timeout).
        single_flight: Reject new submits while a turn is still pending.
    """

    model_config = ConfigDict(validate_default=True)

    backend_url: str = Field(
        default_factory=lambda: (
            os.getenv("BACKEND_URL") or os.getenv("VITE_BACKEND_URL") or DEFAULT_BACKEND_URL
        ),
        description="Chat backend base URL",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: os.getenv("CHAT_REQUEST_TIMEOUT") or None,
        gt=0,
        description="Request timeout in seconds (unset means wait indefinitely)",
    )
    single_flight: bool = Field(
        default_factory=lambda: os.getenv("CHAT_SINGLE_FLIGHT", "false"),
        description="Allow at most one outstanding request per session",
    )

    @field_validator("backend_url")
    @classmethod
    def validate_backend_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "Backend URL must start with http:// or https://. Set BACKEND_URL in .env"
            )
        return v.rstrip("/")


# Singleton instance
_client_config: ClientConfig | None = None


def get_client_config() -> ClientConfig:
    """Get or create the process-wide client configuration.

    The environment is read on first call only; later calls return the
    same instance.

    Returns:
        The ClientConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    global _client_config
    if _client_config is None:
        _client_config = ClientConfig()
    return _client_config
