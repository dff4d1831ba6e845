"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - make_pdf: Builds in-memory PDFs with one text line per page
    - backend_config: BackendConfig pointing at a fake endpoint
    - gemini_reply: Factory for generateContent response bodies
    - stub_backend: Recording MockTransport for the generation endpoint
    - controller: SessionController wired to the stub backend
    - async_client: HTTPX client for API testing
"""

import io
import json
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject

from docchat.api.app import create_app
from docchat.chat.session import SessionController
from docchat.client.completion import CompletionClient
from docchat.client.config import BackendConfig


def build_pdf(page_texts: list[str]) -> bytes:
    """Create a PDF whose pages each show one line of Helvetica text."""
    writer = PdfWriter()
    font = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/Type1"),
            NameObject("/BaseFont"): NameObject("/Helvetica"),
            NameObject("/Encoding"): NameObject("/WinAnsiEncoding"),
        }
    )
    font_ref = writer._add_object(font)

    for text in page_texts:
        page = writer.add_blank_page(width=612, height=792)
        content = DecodedStreamObject()
        content.set_data(f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1"))
        page[NameObject("/Contents")] = writer._add_object(content)
        page[NameObject("/Resources")] = DictionaryObject(
            {NameObject("/Font"): DictionaryObject({NameObject("/F1"): font_ref})}
        )

    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class StubBackend:
    """Records requests sent to the generation endpoint and answers them."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json=gemini_body("Hello from the model"))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def payload(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


def gemini_body(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


@pytest.fixture
def make_pdf() -> Callable[[list[str]], bytes]:
    return build_pdf


@pytest.fixture
def gemini_reply() -> Callable[[str], dict[str, Any]]:
    return gemini_body


@pytest.fixture
def backend_config() -> BackendConfig:
    """Return configuration for a fake backend.

    Returns:
        BackendConfig with a test key and a non-routable base URL.
    """
    return BackendConfig(
        api_key="test-key",
        base_url="https://gemini.test/v1beta",
        model_name="gemini-test",
        backend_name="Gemini",
        timeout=5.0,
    )


@pytest.fixture
def stub_backend() -> StubBackend:
    return StubBackend()


@pytest.fixture
def completion_client(backend_config: BackendConfig, stub_backend: StubBackend) -> CompletionClient:
    return CompletionClient(backend_config, transport=stub_backend.transport)


@pytest.fixture
def controller(completion_client: CompletionClient) -> SessionController:
    return SessionController(completion_client)


@pytest.fixture
async def async_client(controller: SessionController) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app(controller))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
