"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Message list rendered from the conversation store
    - Pending indicator while a turn is outstanding
    - Draft input with Enter/button submit
    - Dark/light theme toggle (presentation only)
    - Upload and settings buttons (not wired)

Contains no conversation logic. Delegates all state changes to the store.
"""
