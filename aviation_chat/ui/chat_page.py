"""NiceGUI chat page for the aviation assistant."""

import os

from nicegui import ui

from aviation_chat.client.chat_client import get_chat_client
from aviation_chat.conversation.store import ConversationStore
from aviation_chat.models.schemas import Message

APP_TITLE = "Aviation Assistant"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #eef2f7; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(15, 23, 42, 0.12);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #0b3d91 0%, #1e88e5 100%); }

    .message-user {
        background: #1e88e5;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-bot {
        background: #f1f5f9;
        color: #0f172a;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: #1e88e5; }
    .avatar-bot { background: #0b3d91; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #1e88e5;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: #f8fafc;
        border: 1px solid #e2e8f0;
        border-radius: 12px;
    }
    .input-box:focus-within { border-color: #1e88e5; }

    .message-bot p { margin: 0; }
    .message-bot ul, .message-bot ol { margin: 0.5rem 0; padding-left: 1.25rem; }
</style>
"""


def format_time(message: Message) -> str:
    return message.timestamp.strftime("%I:%M %p")


def build_chat_page() -> None:
    """Build the chat UI for one client. Each browser tab gets its own conversation."""
    ui.add_head_html(CUSTOM_CSS)
    store = ConversationStore(get_chat_client())

    messages_container: ui.column
    scroll_area: ui.scroll_area
    session_label: ui.label
    input_field: ui.textarea
    send_btn: ui.button

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-bot"
        icon = "person" if is_user else "flight"
        avatar_classes = f"w-9 h-9 rounded-full flex items-center justify-center {css}"
        with ui.element("div").classes(avatar_classes):
            ui.icon(icon).classes("text-white text-lg")

    def render_message(msg: Message) -> None:
        align = "justify-end" if msg.is_user else "justify-start"
        bubble = "message-user" if msg.is_user else "message-bot"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not msg.is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[70%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    # Assistant answers are markdown; user text is shown as typed
                    if msg.is_user:
                        ui.label(msg.text).classes("text-sm whitespace-pre-wrap")
                    else:
                        ui.markdown(msg.text).classes("text-sm leading-relaxed")
                ui.label(format_time(msg)).classes(
                    f"text-[10px] text-gray-400 {'self-end' if msg.is_user else 'self-start'}"
                )
            if msg.is_user:
                render_avatar(True)

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            render_avatar(False)
            with (
                ui.element("div").classes("message-bot px-4 py-3"),
                ui.row().classes("items-center gap-2"),
            ):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")
                ui.label("Checking flight data...").classes("text-sm text-gray-500 italic")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in store.messages:
                render_message(msg)
            if store.awaiting_reply:
                render_typing_indicator()
        for control in (input_field, send_btn):
            if store.awaiting_reply:
                control.disable()
            else:
                control.enable()
        session_label.set_text(store.session_id[:8].upper())
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or store.awaiting_reply:
            return
        input_field.value = ""
        await store.submit_user_text(text)

    def new_chat() -> None:
        nonlocal store
        if store.awaiting_reply:
            ui.notify("Please wait for the current reply", type="warning")
            return
        store = ConversationStore(get_chat_client())
        store.subscribe(refresh_messages)
        store.initialize()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("flight_takeoff").classes("text-white text-3xl")
                ui.label(APP_TITLE).classes("text-lg font-semibold text-white")
            with ui.row().classes("items-center gap-3"):
                with ui.element("div").classes(
                    "bg-white/20 rounded-full px-3 py-1 flex items-center gap-2"
                ):
                    ui.icon("tag").classes("text-white/80 text-sm")
                    session_label = ui.label().classes("text-xs text-white/80 font-mono")
                ui.button(icon="add", on_click=new_chat).props("flat round color=white")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
            messages_container = ui.column().classes("w-full gap-4 p-5")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                input_field = (
                    ui.textarea(placeholder="Ask about a flight, airline or airport...")
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .mark("message-input")
                    .on("keydown.enter.prevent", send_message)
                )
            send_btn = (
                ui.button(icon="send", on_click=send_message)
                .props("round unelevated color=primary")
                .mark("send")
            )

    store.subscribe(refresh_messages)
    store.initialize()


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    build_chat_page()


def main() -> None:
    ui.run(title=APP_TITLE, port=int(os.getenv("UI_PORT", "8081")), reload=False)


if __name__ == "__main__":
    main()
