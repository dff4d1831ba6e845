"""PDF parsing utilities for document ingestion.

Responsibilities:
    - PDF text extraction with pypdf, page by page in document order
    - MIME type and header validation before extraction
    - Off-loop extraction for the async session controller

Output is plain text ready to be attached to an outgoing chat turn.
"""

from docchat.parsing.pdf_parser import ExtractionError, extract, extract_text, is_pdf_mime

__all__ = ["ExtractionError", "extract", "extract_text", "is_pdf_mime"]
