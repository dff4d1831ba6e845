"""NiceGUI chat interface backed by an in-process session controller."""

import random
from datetime import datetime

from nicegui import events, ui

from docchat.chat.session import SessionController
from docchat.client.completion import CompletionClient
from docchat.models.schemas import Message, Sender, SessionSnapshot
from docchat.ui.formatting import markdown_to_html

AVATAR_POOL = [
    "https://i.pravatar.cc/150?img=3",
    "https://i.pravatar.cc/150?img=5",
    "https://i.pravatar.cc/150?img=7",
    "https://i.pravatar.cc/150?img=9",
    "https://i.pravatar.cc/150?img=11",
]

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .message-user {
        background: #111827;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-ai {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .message-system {
        background: #dbeafe;
        color: #1e3a8a;
        border-radius: 12px;
    }

    .avatar-ai { background: #d1d5db; }

    .typing { animation: pulse 1.4s infinite ease-in-out; }

    @keyframes pulse {
        0%, 100% { opacity: 1; }
        50% { opacity: 0.4; }
    }

    .message-ai strong { font-weight: 600; }
    .message-ai em { font-style: italic; }
</style>
"""


async def attach_upload(controller: SessionController, file) -> Message | None:
    """Hand an uploaded file to the session.

    Rejected files (wrong type, unreadable PDF) are dropped without telling
    the user; the controller logs them.
    """
    data = await file.read()
    return await controller.upload_document(file.name, file.content_type, data)


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Every page visit gets its own session."""
    ui.add_head_html(CUSTOM_CSS)
    controller = SessionController(CompletionClient())
    dark = ui.dark_mode()
    user_avatar = random.choice(AVATAR_POOL)
    sent_at: dict[int, str] = {}

    messages_container: ui.column
    input_field: ui.input
    send_btn: ui.button

    def render_ai_avatar() -> None:
        with ui.element("div").classes(
            "w-8 h-8 rounded-full flex items-center justify-center avatar-ai"
        ):
            ui.label("AI").classes("text-sm font-bold")

    def render_message(msg: Message) -> None:
        time = sent_at.setdefault(msg.id, datetime.now().strftime("%I:%M %p"))

        if msg.sender == Sender.SYSTEM:
            with ui.row().classes("w-full justify-center"):
                ui.label(msg.text).classes("px-4 py-2 text-sm message-system")
            return

        is_user = msg.sender == Sender.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-ai"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not is_user:
                render_ai_avatar()
            with ui.column().classes("max-w-[70%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    # Markdown for ai replies, plain text for the user
                    if is_user:
                        ui.label(msg.text).classes("text-sm leading-relaxed break-words")
                    else:
                        ui.html(markdown_to_html(msg.text), sanitize=False).classes(
                            "text-sm leading-relaxed"
                        )
                ui.label(time).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
            if is_user:
                ui.image(user_avatar).classes("w-8 h-8 rounded-full")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            render_ai_avatar()
            with ui.element("div").classes("message-ai px-4 py-3 typing"):
                ui.label("Typing...").classes("text-sm text-gray-500 italic")

    def refresh(snapshot: SessionSnapshot) -> None:
        messages_container.clear()
        with messages_container:
            if not snapshot.messages and not snapshot.busy:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("forum").classes("text-5xl text-gray-300")
                    ui.label("Start a conversation").classes("text-lg text-gray-400")
            for msg in snapshot.messages:
                render_message(msg)
            if snapshot.busy:
                render_typing_indicator()
        if snapshot.busy:
            send_btn.disable()
        else:
            send_btn.enable()

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or controller.in_flight:
            return
        input_field.value = ""
        await controller.send(text)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        await attach_upload(controller, e.file)
        upload.reset()

    def new_chat() -> None:
        nonlocal user_avatar
        controller.new_chat()
        input_field.value = ""
        user_avatar = random.choice(AVATAR_POOL)
        sent_at.clear()
        refresh(controller.snapshot())

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-lg mx-auto app-container").style("height: 600px"),
    ):
        # Header
        with ui.row().classes("w-full px-5 py-4 items-center justify-between border-b"):
            ui.label("Chat with Ultron").classes("text-2xl font-semibold")
            with ui.row().classes("items-center gap-2"):
                ui.button("New Chat", icon="add", on_click=new_chat).props("outline dense")
                ui.button(icon="dark_mode", on_click=dark.toggle).props("flat round dense")

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full"),
            ui.column().classes("w-full p-4"),
        ):
            messages_container = ui.column().classes("w-full gap-4")

        # Input + upload
        with ui.row().classes("w-full p-4 gap-2 items-center border-t"):
            input_field = (
                ui.input(placeholder="Type a message...")
                .props("borderless dense")
                .classes("flex-grow")
                .on("keydown.enter", send_message)
            )
            send_btn = ui.button("Send", on_click=send_message).props("unelevated")
            upload = (
                ui.upload(on_upload=handle_upload, auto_upload=True)
                .props("accept=application/pdf flat dense")
                .classes("w-32")
            )

    controller.subscribe(refresh)
    refresh(controller.snapshot())


def main() -> None:
    ui.run(title="DocChat", port=8080, reload=False)


if __name__ in {"__main__", "__mp_main__"}:
    main()
