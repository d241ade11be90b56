"""NiceGUI chat interface backed by a ConversationStore."""

import os

from nicegui import ui

from responsible_chat.client.config import get_client_config
from responsible_chat.client.transport import ChatTransport
from responsible_chat.models.schemas import Message, Role
from responsible_chat.session.store import ConversationStore

APP_TITLE = "Higher-Responsible AI"

FEATURES = [
    ("smart_toy", "Advanced Chat"),
    ("description", "Docs & Summaries"),
    ("image", "Vision Ready"),
    ("shield", "Safety First"),
]

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { min-height: 100vh; }
    body.body--dark {
        background: radial-gradient(circle at 20% 10%, #4c1d95 0%, #0a0a0a 55%);
    }
    body.body--light { background: #ffffff; }

    .logo-dot {
        background: linear-gradient(45deg, #a855f7 0%, #3b82f6 50%, #fb923c 100%);
    }

    .glass {
        border: 1px solid rgba(255, 255, 255, 0.1);
        background: rgba(0, 0, 0, 0.4);
        backdrop-filter: blur(8px);
    }
    body.body--light .glass {
        border-color: #e5e5e5;
        background: rgba(245, 245, 245, 0.8);
    }

    .message-user {
        background: rgba(37, 99, 235, 0.8);
        color: white;
        border-radius: 16px;
    }
    .message-assistant {
        background: rgba(255, 255, 255, 0.1);
        border-radius: 16px;
    }
    body.body--light .message-assistant { background: #e5e5e5; }

    .message-list { height: 50vh; }
</style>
"""


def bubble_classes(message: Message) -> tuple[str, str]:
    """Return (row alignment, bubble style) classes for a message."""
    if message.role == Role.USER:
        return "justify-end", "message-user"
    return "justify-start", "message-assistant"


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each page view gets its own conversation store."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_client_config()
    store = ConversationStore(ChatTransport(config), single_flight=config.single_flight)
    dark = ui.dark_mode(True)

    messages_container: ui.column
    scroll_area: ui.scroll_area
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        align, bubble = bubble_classes(msg)
        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"max-w-[80%] px-4 py-2 text-sm {bubble}"):
                # Plain text only; replies are shown verbatim
                ui.label(msg.content).classes("whitespace-pre-wrap break-words")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in store.messages:
                render_message(msg)
            if store.pending:
                with ui.row().classes("items-center gap-2 opacity-80"):
                    ui.spinner(size="sm")
                    ui.label("Thinking...").classes("text-sm")
        if config.single_flight:
            send_btn.set_enabled(not store.pending)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        await store.submit()

    def toggle_theme() -> None:
        dark.toggle()
        theme_btn.props(f"icon={'light_mode' if dark.value else 'dark_mode'}")
        theme_btn.set_text(f"{'Light' if dark.value else 'Dark'} mode")

    # === UI Layout ===
    with ui.row().classes("w-full px-6 py-4 items-center justify-between"):
        with ui.row().classes("items-center gap-2"):
            ui.element("div").classes("w-8 h-8 rounded-full logo-dot")
            ui.label(APP_TITLE).classes("font-semibold")
        with ui.row().classes("items-center gap-2"):
            theme_btn = ui.button("Light mode", icon="light_mode", on_click=toggle_theme).props(
                "flat rounded no-caps"
            )
            # Settings panel is not implemented
            ui.button("Settings", icon="settings").props("flat rounded no-caps")

    with ui.row().classes("w-full max-w-6xl mx-auto px-6 pb-32 pt-12 gap-6 no-wrap"):
        # Features
        with ui.column().classes("w-1/3 gap-4"):
            ui.label("Your Responsible AI Copilot").classes("text-3xl font-bold")
            ui.label(
                "Chat smartly, process documents, generate content, "
                "and keep everything safe and private."
            ).classes("opacity-80")
            with ui.grid(columns=2).classes("gap-2 text-sm"):
                for icon, label in FEATURES:
                    with ui.row().classes("glass rounded-lg px-3 py-2 items-center gap-2"):
                        ui.icon(icon)
                        ui.label(label)

        # Chat
        with ui.column().classes("flex-grow glass rounded-xl p-3 gap-3"):
            with ui.scroll_area().classes("w-full message-list glass rounded-lg") as scroll_area:
                messages_container = ui.column().classes("w-full gap-3 p-2")

            with ui.row().classes("w-full items-center gap-2 no-wrap"):
                # Upload handling is not implemented
                ui.button("Upload", icon="upload").props("flat no-caps")
                (
                    ui.input(placeholder="Ask anything responsibly...")
                    .props("outlined dense")
                    .classes("flex-grow")
                    .bind_value(store, "draft")
                    .on("keydown.enter", send_message)
                )
                send_btn = ui.button("Send", icon="send", on_click=send_message).props(
                    "unelevated no-caps color=primary"
                )

    ui.label(
        "Built for learning, research, productivity and more. Stay safe and responsible."
    ).classes("w-full max-w-6xl mx-auto px-6 pb-10 text-xs opacity-60")

    store.subscribe(refresh_messages)
    refresh_messages()


def main() -> None:
    ui.run(
        title=APP_TITLE,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
