"""PDF, Word, and plain-text extraction for uploaded hiring documents."""

import io
import logging
from pathlib import Path

logger = logging.getLogger("talent_match.documents")

SUPPORTED_FORMATS = (".pdf", ".docx", ".doc", ".txt", ".md")

MANUAL_ENTRY_HINT = "Please paste the document text manually instead."


class DocumentError(ValueError):
    """Base error for documents whose text cannot be read."""


class UnsupportedFormat(DocumentError):
    pass


class ExtractionFailure(DocumentError):
    pass


def extract_text(file_path: str) -> str:
    """Extract text from a document on disk, dispatching on its extension."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {file_path}")
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        raise
    except OSError as e:
        logger.warning("Cannot read %s: %s", path.name, e)
        raise ExtractionFailure(f"Could not read {path.name}: {e.strerror or e}. {MANUAL_ENTRY_HINT}") from e
    return extract_text_from_bytes(data, path.suffix)


def extract_text_from_bytes(data: bytes, format_hint: str) -> str:
    """Extract text from raw document bytes.

    format_hint is a file extension or name (".pdf", "resume.docx").
    """
    suffix = _normalize_format(format_hint)
    if suffix == ".pdf":
        text = _extract_pdf_text(data)
    elif suffix in (".docx", ".doc"):
        text = _extract_docx_text(data)
    elif suffix in (".txt", ".md"):
        text = _decode_plain_text(data)
    else:
        raise UnsupportedFormat(
            f"Unsupported file format: {suffix or format_hint!r} "
            f"(supported: {', '.join(SUPPORTED_FORMATS)}). {MANUAL_ENTRY_HINT}"
        )

    if not text.strip():
        raise ExtractionFailure(f"No text could be extracted from this document. {MANUAL_ENTRY_HINT}")
    return text


def _normalize_format(format_hint: str) -> str:
    hint = (format_hint or "").strip().lower()
    if not hint:
        return ""
    if not hint.startswith(".") or "." in hint[1:]:
        hint = Path(hint).suffix or f".{hint.lstrip('.')}"
    return hint


def _extract_pdf_text(data: bytes) -> str:
    """Extract text from a PDF using PyPDF2, one page after another."""
    from PyPDF2 import PdfReader
    from PyPDF2.errors import PdfReadError

    try:
        reader = PdfReader(io.BytesIO(data))
        pages = []
        for page in reader.pages:
            text = page.extract_text()
            if text:
                pages.append(text.strip())
    except (PdfReadError, ValueError, KeyError) as e:
        logger.warning("Failed to parse PDF: %s", e)
        raise ExtractionFailure(
            "Failed to parse PDF file. The file may be corrupted or in an unsupported format. "
            f"Try re-saving it as a new PDF. {MANUAL_ENTRY_HINT}"
        ) from e

    text = "\n".join(p for p in pages if p)
    if not text.strip():
        raise ExtractionFailure(
            "No text could be extracted from this PDF. It may be image-based (scanned). "
            f"{MANUAL_ENTRY_HINT}"
        )
    return text


def _extract_docx_text(data: bytes) -> str:
    """Extract paragraph text from a Word document using python-docx."""
    from docx import Document

    try:
        document = Document(io.BytesIO(data))
    except Exception as e:
        logger.warning("Failed to parse Word document: %s", e)
        raise ExtractionFailure(
            f"Failed to parse Word document. Legacy .doc files must be re-saved as .docx. {MANUAL_ENTRY_HINT}"
        ) from e

    lines = [p.text for p in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            lines.append("\t".join(cell.text for cell in row.cells))
    return "\n".join(lines)


def _decode_plain_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")
