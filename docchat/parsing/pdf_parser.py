"""PDF text extraction using pypdf.

Pages are visited in document order. Within a page, the text fragments
reported by the content stream are joined with a single space; every page is
terminated by a newline, so pages ``["a", "b", "c"]`` become ``"a\\nb\\nc\\n"``.
"""

import asyncio
import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
PDF_MIME_TYPE = "application/pdf"
PAGE_SEPARATOR = "\n"
FRAGMENT_SEPARATOR = " "


class ExtractionError(Exception):
    """Raised when a PDF cannot be read or a page fails to decode."""

    pass


def is_pdf_mime(content_type: str | None) -> bool:
    """Check whether a MIME type denotes a PDF.

    Parameters such as ``; charset=binary`` are ignored.
    """
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() == PDF_MIME_TYPE


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.

    Raises:
        ExtractionError: If validation fails.
    """
    if not file_content:
        raise ExtractionError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise ExtractionError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise ExtractionError("Invalid PDF: file does not start with PDF header")


def _extract_page_text(page) -> str:
    fragments: list[str] = []

    def collect(text: str, *_: object) -> None:
        stripped = text.strip()
        if stripped:
            fragments.append(stripped)

    page.extract_text(visitor_text=collect)
    return FRAGMENT_SEPARATOR.join(fragments)


def extract_text(file_content: bytes) -> str:
    """Extract the text of every page of a PDF.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        Page texts in document order, each followed by a newline.

    Raises:
        ExtractionError: If the file is invalid, too large, empty, or any
            page fails to decode.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = list(reader.pages)
    except PdfReadError as e:
        raise ExtractionError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise ExtractionError(f"Failed to read PDF: {e}") from e

    if not pages:
        raise ExtractionError("PDF contains no pages")

    text_parts: list[str] = []
    for i, page in enumerate(pages):
        try:
            text_parts.append(_extract_page_text(page) + PAGE_SEPARATOR)
        except Exception as e:
            raise ExtractionError(f"Failed to extract text from page {i + 1}: {e}") from e

    text = "".join(text_parts)

    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return text


async def extract(file_content: bytes) -> str:
    """Extract PDF text in a worker thread so the event loop stays responsive.

    Raises:
        ExtractionError: See :func:`extract_text`.
    """
    return await asyncio.to_thread(extract_text, file_content)
