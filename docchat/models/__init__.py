"""Pydantic models for the chat core and the HTTP API.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: Immutable entry of the chat history
    - DocumentContext: Text of the attached PDF
    - Turn / OutgoingRequest: Wire schema of the generation endpoint
    - SessionSnapshot: Read-only session view for rendering
    - ChatRequest / ChatResponse / NewChatResponse / PDFUploadResponse: API payloads
"""

from docchat.models.schemas import (
    ChatRequest,
    ChatResponse,
    DocumentContext,
    GenerationConfig,
    Message,
    NewChatResponse,
    OutgoingRequest,
    Part,
    PDFUploadResponse,
    Sender,
    SessionSnapshot,
    Turn,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "DocumentContext",
    "GenerationConfig",
    "Message",
    "NewChatResponse",
    "OutgoingRequest",
    "PDFUploadResponse",
    "Part",
    "Sender",
    "SessionSnapshot",
    "Turn",
]
