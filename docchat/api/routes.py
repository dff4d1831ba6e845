"""PDF upload endpoint for document ingestion.

Handles file upload, size validation, and attaching the extracted text to
the session.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from docchat.api.deps import get_controller
from docchat.chat.session import SessionController
from docchat.models.schemas import PDFUploadResponse
from docchat.parsing.pdf_parser import MAX_FILE_SIZE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])

# 10MB limit matches pdf_parser constant
MAX_UPLOAD_SIZE = MAX_FILE_SIZE


def _validate_filename(filename: str | None) -> str:
    """Validate that the upload carries a filename.

    Raises:
        HTTPException: 400 if the filename is missing.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )
    return filename


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/pdf", response_model=PDFUploadResponse)
async def upload_pdf(
    file: UploadFile,
    controller: Annotated[SessionController, Depends(get_controller)],
) -> PDFUploadResponse:
    """Upload a PDF and attach its text to the conversation.

    Files that are not ``application/pdf`` or that fail to parse are ignored
    and reported with ``success: false``.

    Raises:
        400: Missing filename.
        413: File exceeds 10MB limit.
    """
    filename = _validate_filename(file.filename)
    content = await _read_and_validate_size(file)

    notice = await controller.upload_document(filename, file.content_type, content)

    return PDFUploadResponse(
        filename=filename,
        success=notice is not None,
        session=controller.snapshot(),
    )
