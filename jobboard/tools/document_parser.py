"""
Document parsing tool for CV uploads.

Extracts text content from PDF files using pypdf and DOCX files using python-docx.
"""

import logging
from io import BytesIO

from docx import Document
from pypdf import PdfReader

logger = logging.getLogger(__name__)

PDF = "application/pdf"
DOC = "application/msword"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ALLOWED_CONTENT_TYPES = (PDF, DOC, DOCX)


class DocumentParseError(ValueError):
    """Raised when no text can be extracted from an uploaded document."""


def parse_pdf(pdf_content: bytes) -> str:
    """
    Extract text from a PDF file.

    Args:
        pdf_content: Raw bytes of the PDF file

    Returns:
        Extracted text content from all pages

    Raises:
        DocumentParseError: If the PDF cannot be read or has no text
    """
    try:
        reader = PdfReader(BytesIO(pdf_content))
        text_parts = []

        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    except Exception as e:
        logger.error(f"PDF extraction failed: {e}")
        raise DocumentParseError(f"Failed to extract text from PDF: {e}") from e

    if not text_parts:
        raise DocumentParseError("No text could be extracted from PDF")

    return "\n\n".join(text_parts)


def parse_docx(docx_content: bytes) -> str:
    """
    Extract text from a DOCX file, paragraphs first, then table rows.

    Raises:
        DocumentParseError: If the DOCX cannot be read or has no text
    """
    try:
        doc = Document(BytesIO(docx_content))
        paragraphs = [p.text.strip() for p in doc.paragraphs if p.text.strip()]

        for table in doc.tables:
            for row in table.rows:
                row_text = " | ".join(cell.text.strip() for cell in row.cells if cell.text.strip())
                if row_text:
                    paragraphs.append(row_text)
    except Exception as e:
        logger.error(f"DOCX extraction failed: {e}")
        raise DocumentParseError(f"Failed to extract text from DOCX: {e}") from e

    if not paragraphs:
        raise DocumentParseError("No text could be extracted from DOCX")

    return "\n".join(paragraphs)


def extract_text(content: bytes, content_type: str) -> str:
    """Dispatch to the extractor for `content_type`."""
    if content_type == PDF:
        text = parse_pdf(content)
    elif content_type == DOCX:
        text = parse_docx(content)
    else:
        # Legacy .doc is accepted on upload but has no extractor
        raise DocumentParseError(f"Text extraction not supported for {content_type}")

    logger.info(f"Extracted {len(text)} chars from {content_type}")
    return text
