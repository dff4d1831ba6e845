"""Builds the generateContent request for one outgoing turn.

The attached document is merged into the request only. Stored messages are
frozen and never rewritten, so history keeps the short text the user typed.
"""

from collections.abc import Sequence

from docchat.models.schemas import (
    DocumentContext,
    GenerationConfig,
    Message,
    OutgoingRequest,
    Part,
    Sender,
    Turn,
)

ATTACHMENT_SEPARATOR = "\n\n---\n(Attached content)\n\n"

_ROLES = {
    Sender.USER: "user",
    Sender.AI: "model",
}


def attach_document(text: str, document: DocumentContext) -> str:
    """Append the document text to a user message."""
    return f"{text}{ATTACHMENT_SEPARATOR}{document.raw_text}"


def assemble(
    messages: Sequence[Message],
    pending_document: DocumentContext | None,
    new_user_text: str,
) -> OutgoingRequest:
    """Build the request for a new user turn.

    Args:
        messages: History before the new turn was committed.
        pending_document: Attached document, if any.
        new_user_text: Text of the turn being sent.

    Returns:
        Request whose contents are the user/ai history followed by the new
        turn, with the document text appended to that last turn.
    """
    turns = [
        Turn(role=_ROLES[message.sender], parts=[Part(text=message.text)])
        for message in messages
        if message.sender in _ROLES
    ]

    last_text = new_user_text
    if pending_document is not None:
        last_text = attach_document(new_user_text, pending_document)
    turns.append(Turn(role="user", parts=[Part(text=last_text)]))

    return OutgoingRequest(contents=turns, generation_config=GenerationConfig())
