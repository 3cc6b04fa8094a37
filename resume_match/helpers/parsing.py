import io
import mimetypes
import re
import unicodedata
from typing import Optional

from docx import Document as DocxDocument
from pdfminer.high_level import extract_text as pdf_extract

from resume_match.models.models import Document, ExtractedText
from resume_match.utils.exceptions import CorruptDocument, EmptyContent, UnsupportedFormat
from resume_match.utils.logging_config import get_logger

logger = get_logger(__name__)

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT = "text/plain"

MEDIA_TYPE_ALIASES = {
    PDF: PDF,
    "application/x-pdf": PDF,
    DOCX: DOCX,
    TEXT: TEXT,
}

_EXTENSION_TYPES = {".pdf": PDF, ".docx": DOCX, ".txt": TEXT}
_GENERIC_TYPES = {"", "application/octet-stream", "binary/octet-stream"}

_WHITESPACE = re.compile(r"\s+")


def resolve_media_type(declared: Optional[str], filename: Optional[str] = None) -> str:
    """Canonical media type for a document; guesses from the filename when the declared type is generic."""
    media_type = (declared or "").split(";", 1)[0].strip().lower()
    if media_type in _GENERIC_TYPES and filename:
        ext = "." + filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        media_type = _EXTENSION_TYPES.get(ext) or (mimetypes.guess_type(filename)[0] or "")
    return MEDIA_TYPE_ALIASES.get(media_type, media_type)


def clean_text(x: str) -> str:
    """Unicode-fold, lowercase, drop control characters and collapse whitespace."""
    x = unicodedata.normalize("NFKC", x).casefold()
    x = "".join(
        ch for ch in x
        if ch.isspace() or not unicodedata.category(ch).startswith("C")
    )
    return _WHITESPACE.sub(" ", x).strip()


def normalize_text(x: str) -> ExtractedText:
    return ExtractedText(text=clean_text(x))


def read_txt(content: bytes) -> str:
    return content.decode("utf-8-sig")


def read_docx(content: bytes) -> str:
    doc = DocxDocument(io.BytesIO(content))
    parts = [p.text for p in doc.paragraphs]
    # table layouts are common in resumes and are not part of doc.paragraphs
    for table in doc.tables:
        for row in table.rows:
            parts.extend(cell.text for cell in row.cells)
    return "\n".join(parts)


def read_pdf(content: bytes) -> str:
    return pdf_extract(io.BytesIO(content))


READERS = {
    PDF: read_pdf,
    DOCX: read_docx,
    TEXT: read_txt,
}


def extract(document: Document) -> ExtractedText:
    """Turn an uploaded document into normalized plain text."""
    media_type = resolve_media_type(document.media_type, document.filename)
    reader = READERS.get(media_type)
    if reader is None:
        raise UnsupportedFormat(
            f"Unsupported document type: {document.media_type or 'unknown'}",
            media_type=document.media_type or "unknown"
        )

    try:
        raw = reader(document.content)
    except Exception as e:
        logger.warning(f"Could not parse {media_type} document ({document.size} bytes): {type(e).__name__}: {e}")
        raise CorruptDocument(
            f"Could not parse {media_type} document: {e}",
            media_type=media_type,
            cause=e
        ) from e

    extracted = normalize_text(raw or "")
    if extracted.is_empty:
        raise EmptyContent(f"No text extracted from {media_type} document ({document.size} bytes)")

    logger.info(f"Extracted {len(extracted.text)} characters from {media_type} document")
    return extracted
