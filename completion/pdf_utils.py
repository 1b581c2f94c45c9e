"""PDF utilities for pulling plain text out of course attachments."""

import io
from typing import List

from pypdf import PdfReader


def extract_pages_text(pdf_bytes: bytes) -> List[str]:
    """Return the extracted text of every page, in order.

    Pages without a text layer (scans) come back as empty strings.
    """
    reader = PdfReader(io.BytesIO(pdf_bytes))
    return [(page.extract_text() or "").strip() for page in reader.pages]


def extract_text_from_pdf_bytes(pdf_bytes: bytes) -> str:
    """Join the text of all pages with blank lines, skipping empty pages."""
    return "\n\n".join(t for t in extract_pages_text(pdf_bytes) if t)


def get_page_count(pdf_bytes: bytes) -> int:
    """Get the total number of pages in a PDF.

    Args:
        pdf_bytes: PDF file bytes

    Returns:
        Number of pages in the PDF
    """
    reader = PdfReader(io.BytesIO(pdf_bytes))
    return len(reader.pages)
