"""Integration tests for the chat and upload endpoints.

Runs the real FastAPI app through httpx ASGITransport with a session
controller whose generation backend is a MockTransport.
"""

import httpx
from httpx import AsyncClient

from docchat.models.schemas import ChatResponse, NewChatResponse, PDFUploadResponse, SessionSnapshot


class TestHealth:
    async def test_health(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "docchat"}


class TestChatEndpoint:
    """Integration tests for POST /chat."""

    async def test_chat_returns_reply_and_session(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/chat", json={"message": "Say hello"})

        assert response.status_code == 200
        data = ChatResponse.model_validate(response.json())
        assert data.reply is not None
        assert data.reply.sender == "ai"
        assert data.reply.text == "Hello from the model"
        assert [m.text for m in data.session.messages] == ["Say hello", "Hello from the model"]
        assert data.session.busy is False

    async def test_whitespace_only_message_is_ignored(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/chat", json={"message": "   "})

        assert response.status_code == 200
        data = ChatResponse.model_validate(response.json())
        assert data.reply is None
        assert data.session.messages == []

    async def test_missing_message_returns_422(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/chat", json={})

        assert response.status_code == 422

    async def test_backend_failure_yields_fallback_reply(
        self, async_client: AsyncClient, stub_backend
    ) -> None:
        stub_backend.response = httpx.Response(502, content=b"Bad Gateway")

        response = await async_client.post("/chat", json={"message": "hello"})

        data = ChatResponse.model_validate(response.json())
        assert data.reply.text == "Error contacting Gemini."

    async def test_session_reflects_history(self, async_client: AsyncClient) -> None:
        await async_client.post("/chat", json={"message": "one"})
        await async_client.post("/chat", json={"message": "two"})

        response = await async_client.get("/session")

        session = SessionSnapshot.model_validate(response.json())
        assert len(session.messages) == 4
        ids = [m.id for m in session.messages]
        assert ids == sorted(ids)

    async def test_new_chat_clears_session(self, async_client: AsyncClient) -> None:
        await async_client.post("/chat", json={"message": "one"})

        response = await async_client.post("/session/new")

        data = NewChatResponse.model_validate(response.json())
        assert data.reset_applied is True
        assert data.session.messages == []
        assert data.session.document_filename is None


class TestPDFUpload:
    """Integration tests for POST /upload/pdf."""

    async def test_upload_pdf_attaches_document(self, async_client: AsyncClient, make_pdf) -> None:
        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("sample.pdf", make_pdf(["a", "b"]), "application/pdf")},
        )

        assert response.status_code == 200
        data = PDFUploadResponse.model_validate(response.json())
        assert data.success is True
        assert data.filename == "sample.pdf"
        assert data.session.document_filename == "sample.pdf"
        assert [m.text for m in data.session.messages] == ['1 PDF uploaded: "sample.pdf"']

    async def test_upload_then_chat_sends_document_text(
        self, async_client: AsyncClient, stub_backend, make_pdf
    ) -> None:
        await async_client.post(
            "/upload/pdf",
            files={"file": ("sample.pdf", make_pdf(["a", "b"]), "application/pdf")},
        )

        response = await async_client.post("/chat", json={"message": "summarize"})

        assert response.status_code == 200
        last_turn = stub_backend.payload()["contents"][-1]
        assert last_turn["parts"][0]["text"] == "summarize\n\n---\n(Attached content)\n\na\nb\n"
        session = ChatResponse.model_validate(response.json()).session
        assert session.messages[1].text == "summarize"

    async def test_non_pdf_type_is_ignored(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("document.txt", b"plain text", "text/plain")},
        )

        assert response.status_code == 200
        data = PDFUploadResponse.model_validate(response.json())
        assert data.success is False
        assert data.session.messages == []

    async def test_corrupt_pdf_is_ignored(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("fake.pdf", b"not really a pdf", "application/pdf")},
        )

        assert response.status_code == 200
        data = PDFUploadResponse.model_validate(response.json())
        assert data.success is False
        assert data.session.document_filename is None

    async def test_reject_oversized_file(self, async_client: AsyncClient) -> None:
        """File exceeding 10MB limit is rejected with 413."""
        oversized_content = b"%PDF-1.4\n" + (b"x" * (10 * 1024 * 1024 + 1024))

        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("large.pdf", oversized_content, "application/pdf")},
        )

        assert response.status_code == 413

    async def test_missing_file_returns_422(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/upload/pdf")

        assert response.status_code == 422
