"""Conversation session state.

Responsibilities:
    - Ordered, append-only message list seeded with a welcome message
    - Pending flag spanning each outstanding backend request
    - Draft text and submit lifecycle
    - Change notifications for the UI layer

Holds no UI code; the chat page renders from it.
"""

from responsible_chat.session.store import ConversationStore

__all__ = ["ConversationStore"]
