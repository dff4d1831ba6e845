"""Conversation core: message history, context assembly, and session control.

Responsibilities:
    - Append-only message log with stable, increasing ids
    - Request assembly that merges the attached PDF into the outgoing turn only
    - Send/upload/reset state machine with an explicit busy guard

Has no knowledge of HTTP routes or UI widgets.
"""

from docchat.chat.assembler import ATTACHMENT_SEPARATOR, assemble
from docchat.chat.session import SessionController, SessionState
from docchat.chat.store import MessageStore

__all__ = [
    "ATTACHMENT_SEPARATOR",
    "MessageStore",
    "SessionController",
    "SessionState",
    "assemble",
]
