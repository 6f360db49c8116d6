"""
Tools for CV documents.

- document_parser: Extract text from uploaded PDF/DOCX files
"""

from jobboard.tools.document_parser import (
    ALLOWED_CONTENT_TYPES,
    DocumentParseError,
    extract_text,
    parse_docx,
    parse_pdf,
)

__all__ = ["ALLOWED_CONTENT_TYPES", "DocumentParseError", "extract_text", "parse_docx", "parse_pdf"]
