"""Chat and session endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from docchat.api.deps import get_controller
from docchat.chat.session import SessionController
from docchat.models.schemas import ChatRequest, ChatResponse, NewChatResponse, SessionSnapshot


router = APIRouter(tags=["chat"])

Controller = Annotated[SessionController, Depends(get_controller)]


@router.get("/session", response_model=SessionSnapshot)
async def get_session(controller: Controller) -> SessionSnapshot:
    """Return the stored messages and the busy state."""
    return controller.snapshot()


@router.post("/session/new", response_model=NewChatResponse)
async def new_chat(controller: Controller) -> NewChatResponse:
    """Start a new chat.

    If a reply or upload is in flight, the reset is applied once it settles
    and ``reset_applied`` is false.
    """
    applied = controller.new_chat()
    return NewChatResponse(reset_applied=applied, session=controller.snapshot())


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, controller: Controller) -> ChatResponse:
    """Send a user message and wait for the reply.

    Blank messages and messages sent while another request is in flight are
    ignored and return ``reply: null``.
    """
    reply = await controller.send(request.message)
    return ChatResponse(reply=reply, session=controller.snapshot())
