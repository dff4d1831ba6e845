"""Session state and the controller driving send/upload/reset cycles.

All mutation happens on the event loop thread. Guards are checked and set
before the first ``await``, so a second send or upload issued while one is in
flight is ignored instead of racing it.
"""

import logging
from collections.abc import Callable

from docchat.chat.assembler import assemble
from docchat.chat.store import MessageStore
from docchat.client.completion import CompletionClient, CompletionError
from docchat.models.schemas import DocumentContext, Message, Sender, SessionSnapshot
from docchat.parsing.pdf_parser import ExtractionError, extract, is_pdf_mime

logger = logging.getLogger(__name__)

SessionObserver = Callable[[SessionSnapshot], None]


def upload_notice(filename: str) -> str:
    return f'1 PDF uploaded: "{filename}"'


class SessionState:
    """Mutable state of one chat session."""

    def __init__(self) -> None:
        self.messages = MessageStore()
        self.pending_document: DocumentContext | None = None
        self.busy: bool = False
        self.uploading: bool = False

    def reset(self) -> None:
        self.pending_document = None
        self.busy = False
        self.uploading = False
        self.messages.reset()


class SessionController:
    """Orchestrates extraction, context assembly, and completion for a session.

    States:
        Idle: nothing in flight.
        AwaitingReply: a completion is in flight (``busy``).
        Uploading: a document extraction is in flight (``uploading``).

    A ``new_chat`` issued while something is in flight is queued. When the
    operation settles its result is discarded and the reset is applied.

    Args:
        client: Client for the generation backend.
        state: Existing state to drive. A fresh one is created if omitted.
    """

    def __init__(self, client: CompletionClient, state: SessionState | None = None) -> None:
        self._client = client
        self._state = state or SessionState()
        self._observers: list[SessionObserver] = []
        self._reset_requested = False
        self._state.messages.subscribe(lambda _messages: self._notify())

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state.busy

    @property
    def in_flight(self) -> bool:
        return self._state.busy or self._state.uploading

    @property
    def reset_pending(self) -> bool:
        return self._reset_requested

    def messages(self) -> tuple[Message, ...]:
        return self._state.messages.all()

    def snapshot(self) -> SessionSnapshot:
        document = self._state.pending_document
        return SessionSnapshot(
            messages=list(self._state.messages.all()),
            busy=self._state.busy,
            uploading=self._state.uploading,
            document_filename=document.filename if document else None,
        )

    def subscribe(self, observer: SessionObserver) -> None:
        """Register a callback invoked with a snapshot after every change."""
        self._observers.append(observer)

    async def send(self, text: str) -> Message | None:
        """Send a user message and append the reply.

        Args:
            text: Raw user input. Surrounding whitespace is trimmed.

        Returns:
            The appended ai message, or None if the input was blank, another
            operation was in flight, or a queued reset discarded the reply.
        """
        text = text.strip()
        if not text:
            return None
        if self.in_flight:
            logger.warning("Ignoring send while another operation is in flight")
            return None

        history = self._state.messages.all()
        self._state.messages.append(Sender.USER, text)
        self._set_busy(True)
        try:
            request = assemble(history, self._state.pending_document, text)
            result = await self._client.complete(request)
            if self._reset_requested:
                logger.info("Discarding reply after queued reset")
                return None

            if isinstance(result, CompletionError):
                logger.warning(f"Completion failed: {result.reason}")
                reply_text = self._client.fallback_text
            else:
                reply_text = result.text
            return self._state.messages.append(Sender.AI, reply_text)
        finally:
            self._set_busy(False)
            self._apply_queued_reset()

    async def upload_document(
        self, filename: str, content_type: str | None, data: bytes
    ) -> Message | None:
        """Extract a PDF and attach its text to the session.

        Non-PDF uploads are ignored. Extraction failures are logged and leave
        the session unchanged.

        Args:
            filename: Original name of the uploaded file.
            content_type: MIME type reported for the file.
            data: Raw file bytes.

        Returns:
            The appended system message, or None if nothing was attached.
        """
        if not is_pdf_mime(content_type):
            logger.info(f"Ignoring upload of {filename}: unsupported type {content_type}")
            return None
        if self.in_flight:
            logger.warning(f"Ignoring upload of {filename} while another operation is in flight")
            return None

        self._set_uploading(True)
        try:
            raw_text = await extract(data)
            if self._reset_requested:
                logger.info(f"Discarding extracted text of {filename} after queued reset")
                return None

            self._state.pending_document = DocumentContext(raw_text=raw_text, filename=filename)
            logger.info(f"Attached PDF: {filename} ({len(raw_text)} chars)")
            return self._state.messages.append(Sender.SYSTEM, upload_notice(filename))
        except ExtractionError as e:
            logger.warning(f"PDF parse error for {filename}: {e}")
            return None
        finally:
            self._set_uploading(False)
            self._apply_queued_reset()

    def new_chat(self) -> bool:
        """Clear history and the attached document.

        Returns:
            True if the reset was applied now, False if it was queued behind
            an in-flight operation.
        """
        if self.in_flight:
            logger.info("New chat requested while busy; reset queued")
            self._reset_requested = True
            return False
        self._reset()
        return True

    def _reset(self) -> None:
        self._reset_requested = False
        self._state.reset()
        self._notify()

    def _apply_queued_reset(self) -> None:
        if self._reset_requested and not self.in_flight:
            self._reset()

    def _set_busy(self, value: bool) -> None:
        self._state.busy = value
        self._notify()

    def _set_uploading(self, value: bool) -> None:
        self._state.uploading = value
        self._notify()

    def _notify(self) -> None:
        if not self._observers:
            return
        snapshot = self.snapshot()
        for observer in self._observers:
            observer(snapshot)
