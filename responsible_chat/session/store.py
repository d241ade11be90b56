"""Conversation store: the single source of truth for the chat transcript.

Owns the message list, the pending flag and the draft text for one page view.
All mutations happen on the event loop between awaits, so no locking is
needed; the only suspension point is the awaited transport call.

Overlapping submits are allowed unless ``single_flight`` is set. When turns
overlap, assistant replies are appended in completion order, which may differ
from submission order.
"""

import logging
from collections.abc import Callable

from responsible_chat.client.errors import ChatTransportError
from responsible_chat.client.transport import ChatTransport
from responsible_chat.models.schemas import WELCOME_MESSAGE, Message, Role

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "
CANCELLED = "Request cancelled"


class ConversationStore:
    """In-memory chat session state with submit/reply lifecycle.

    Args:
        transport: Anything with an ``async send(text) -> str`` method.
        single_flight: Reject submits while a turn is still pending.
        welcome_message: Seeded assistant greeting.
    """

    def __init__(
        self,
        transport: ChatTransport,
        single_flight: bool = False,
        welcome_message: str = WELCOME_MESSAGE,
    ) -> None:
        self._transport = transport
        self._single_flight = single_flight
        self._messages: list[Message] = [Message(role=Role.ASSISTANT, content=welcome_message)]
        self._in_flight = 0
        self._listeners: list[Callable[[], None]] = []
        self.draft: str = ""

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def pending(self) -> bool:
        return self._in_flight > 0

    @property
    def turns_in_flight(self) -> int:
        return self._in_flight

    def subscribe(self, callback: Callable[[], None]) -> None:
        """Register a callback run after every state change."""
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def set_draft(self, text: str) -> None:
        self.draft = text

    async def submit(self) -> Message | None:
        """Send the current draft as a user turn.

        Appends the user message, awaits the transport and appends exactly one
        terminal assistant message, either the reply or an ``Error: ...`` line.

        Returns:
            The terminal assistant message, or None if nothing was sent
            (blank draft, or a turn already pending under single-flight).
        """
        text = self.draft.strip()
        if not text:
            return None
        if self._single_flight and self.pending:
            logger.debug("Submit ignored: a turn is already pending")
            return None

        self.draft = ""
        self._append(Message(role=Role.USER, content=text))
        self._in_flight += 1
        self._notify()

        terminal: Message | None = None
        try:
            reply = await self._transport.send(text)
        except ChatTransportError as e:
            logger.warning(f"Chat turn failed: {e}")
            terminal = Message(role=Role.ASSISTANT, content=f"{ERROR_PREFIX}{e}")
        except Exception as e:
            logger.exception("Unexpected error during chat turn")
            terminal = Message(
                role=Role.ASSISTANT, content=f"{ERROR_PREFIX}{str(e) or type(e).__name__}"
            )
        else:
            terminal = Message(role=Role.ASSISTANT, content=reply)
        finally:
            # Cancellation skips the handlers above but still ends the turn
            if terminal is None:
                logger.warning("Chat turn cancelled before a reply arrived")
                terminal = Message(role=Role.ASSISTANT, content=f"{ERROR_PREFIX}{CANCELLED}")
            self._append(terminal)
            self._in_flight -= 1
            self._notify()
        return terminal

    def _append(self, message: Message) -> None:
        self._messages.append(message)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            try:
                callback()
            except Exception:
                logger.exception(f"Conversation listener {callback!r} failed")
