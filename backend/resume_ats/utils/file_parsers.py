import io
import logging
from enum import Enum

import docx2txt
import mammoth
from PyPDF2 import PdfReader

from ..core.exceptions import ExtractionFailed, UnsupportedFormat

logger = logging.getLogger(__name__)

DEFAULT_PDF_MAX_PAGES = 5
WORD_PARSE_ERROR = (
    "Could not parse DOCX file. The file may be corrupted or in an unsupported format."
)


class ResumeFormat(str, Enum):
    PDF = "pdf"
    WORD = "docx"
    LEGACY_WORD = "doc"
    TEXT = "text"


def detect_format(content_type: str | None) -> ResumeFormat:
    """Map a declared MIME type onto one of the supported resume formats."""
    declared = (content_type or "").lower()

    if "pdf" in declared:
        return ResumeFormat.PDF
    if "wordprocessingml" in declared or "docx" in declared:
        return ResumeFormat.WORD
    if "msword" in declared:
        return ResumeFormat.LEGACY_WORD
    if "text/plain" in declared:
        return ResumeFormat.TEXT

    raise UnsupportedFormat()


def extract_text_from_pdf(content: bytes, max_pages: int | None = DEFAULT_PDF_MAX_PAGES) -> str:
    """Return the text of the first ``max_pages`` pages of a PDF.

    Only the text layer is read. ``max_pages`` of ``None`` or 0 reads every page.
    Corrupt or encrypted documents raise ExtractionFailed with the reader's message.
    """
    try:
        # Empty user passwords are decrypted on open; others fail on page access
        reader = PdfReader(io.BytesIO(content))

        pages = reader.pages
        if max_pages:
            pages = pages[:max_pages]

        text_parts = []
        for page in pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    except Exception as e:
        logger.warning(f"PDF extraction failed: {e}")
        raise ExtractionFailed(f"Failed to parse file: {e}") from e

    return "\n".join(text_parts)


def extract_text_from_docx(content: bytes) -> str:
    """docx2txt reads the zip container straight from memory."""
    try:
        return docx2txt.process(io.BytesIO(content)) or ""
    except Exception as e:
        logger.warning(f"DOCX extraction failed: {e}")
        raise ExtractionFailed(WORD_PARSE_ERROR) from e


def extract_text_from_doc(content: bytes) -> str:
    """Use mammoth to extract raw text from uploads declared as application/msword."""
    try:
        result = mammoth.extract_raw_text(io.BytesIO(content))
        return result.value or ""
    except Exception as e:
        logger.warning(f"Word extraction failed: {e}")
        raise ExtractionFailed(WORD_PARSE_ERROR) from e


def extract_text_from_plain(content: bytes) -> str:
    # Malformed bytes must not block processing
    return content.decode("utf-8", errors="replace")


def extract_text(
    content: bytes,
    content_type: str | None,
    pdf_max_pages: int | None = DEFAULT_PDF_MAX_PAGES,
) -> str:
    """Dispatch on the declared MIME type. Unknown types fail before any decoding."""
    fmt = detect_format(content_type)
    logger.debug(f"Extracting {fmt.value} resume ({len(content)} bytes)")

    if fmt is ResumeFormat.PDF:
        return extract_text_from_pdf(content, max_pages=pdf_max_pages)
    if fmt is ResumeFormat.WORD:
        return extract_text_from_docx(content)
    if fmt is ResumeFormat.LEGACY_WORD:
        return extract_text_from_doc(content)
    return extract_text_from_plain(content)
