from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sender(str, Enum):
    """Who produced a message."""

    USER = "user"
    AI = "ai"
    SYSTEM = "system"


class Message(BaseModel):
    """A single entry of the chat history.

    Attributes:
        id: Strictly increasing identifier assigned by the message store.
        sender: The message origin (user, ai, or system).
        text: The message text exactly as it was stored.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    sender: Sender
    text: str


class DocumentContext(BaseModel):
    """Text extracted from the most recently uploaded PDF.

    Attributes:
        raw_text: Extracted text of every page.
        filename: Original name of the uploaded file.
    """

    model_config = ConfigDict(frozen=True)

    raw_text: str
    filename: str


class Part(BaseModel):
    text: str


class Turn(BaseModel):
    """One role-tagged unit of conversation sent to the generation backend."""

    role: Literal["user", "model"]
    parts: list[Part]


class GenerationConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response_mime_type: str = Field(default="text/plain", alias="responseMimeType")


class OutgoingRequest(BaseModel):
    """Request body for the generateContent endpoint.

    Serialize with ``model_dump(by_alias=True)`` to get the wire field names.

    Attributes:
        contents: Ordered conversation turns.
        generation_config: Fixed generation settings (plain-text replies).
    """

    model_config = ConfigDict(populate_by_name=True)

    contents: list[Turn]
    generation_config: GenerationConfig = Field(
        default_factory=GenerationConfig, alias="generationConfig"
    )


class SessionSnapshot(BaseModel):
    """Read-only view of a chat session for rendering.

    Attributes:
        messages: Stored messages in insertion order.
        busy: Whether a reply is being awaited.
        uploading: Whether a document extraction is in flight.
        document_filename: Name of the attached document, if any.
    """

    messages: list[Message]
    busy: bool
    uploading: bool
    document_filename: str | None = None


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's question or prompt. Blank messages are ignored.
    """

    message: str

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatResponse(BaseModel):
    """Result of a chat request.

    Attributes:
        reply: The ai message appended for this request, or None if ignored.
        session: Session state after the request.
    """

    reply: Message | None = None
    session: SessionSnapshot


class NewChatResponse(BaseModel):
    reset_applied: bool
    session: SessionSnapshot


class PDFUploadResponse(BaseModel):
    """Response after PDF upload processing.

    Attributes:
        filename: Name of the uploaded file.
        success: Whether the document is now attached to the session.
        session: Session state after the upload.
    """

    filename: str
    success: bool
    session: SessionSnapshot
