"""Request dependencies shared by the API routers."""

from fastapi import Request

from docchat.chat.session import SessionController
from docchat.client.completion import CompletionClient


def get_controller(request: Request) -> SessionController:
    """Return the session controller owned by the application.

    The default controller is created on first use so the app can be imported
    without backend credentials.
    """
    state = request.app.state
    if getattr(state, "controller", None) is None:
        state.controller = SessionController(CompletionClient())
    return state.controller
