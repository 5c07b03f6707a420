"""
Document decoding: raw PDF / Word bytes to plain text.
"""
import io
import logging
from enum import Enum
from typing import Protocol

import docx
import fitz  # PyMuPDF

from ..exceptions import DocumentDecodeError, UnsupportedFormat

logger = logging.getLogger(__name__)


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"

    @classmethod
    def resolve(cls, declared_format) -> "DocumentFormat":
        """Accept "pdf", ".PDF", "resume.docx" or a DocumentFormat."""
        if isinstance(declared_format, cls):
            return declared_format
        if not isinstance(declared_format, str):
            raise UnsupportedFormat(declared_format)
        extension = declared_format.strip().lower().rsplit(".", 1)[-1]
        try:
            return cls(extension)
        except ValueError:
            raise UnsupportedFormat(declared_format) from None


class TextExtractor(Protocol):
    def extract(self, data: bytes, fmt: DocumentFormat) -> str:
        ...


def pdf_to_text(pdf_bytes: bytes) -> str:
    """Extract the text layer of every page using PyMuPDF."""
    pdf_document = fitz.open(stream=pdf_bytes, filetype="pdf")
    try:
        pages = [page.get_text() for page in pdf_document]
    finally:
        pdf_document.close()
    return "\n".join(pages)


def docx_to_text(docx_bytes: bytes) -> str:
    """Paragraph and table text of a Word document."""
    document = docx.Document(io.BytesIO(docx_bytes))
    lines = [paragraph.text for paragraph in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            lines.append(" | ".join(cell.text for cell in row.cells))
    return "\n".join(lines)


class DocumentTextExtractor:
    """
    Default TextExtractor. Legacy .doc uploads go through the DOCX reader,
    which only succeeds when the file is really OOXML under a .doc name.
    """

    def extract(self, data: bytes, fmt: DocumentFormat) -> str:
        fmt = DocumentFormat.resolve(fmt)
        try:
            if fmt is DocumentFormat.PDF:
                return pdf_to_text(data)
            return docx_to_text(data)
        except Exception as e:
            logger.warning(f"{fmt.value.upper()} parsing failed: {e}")
            raise DocumentDecodeError(f"{fmt.value.upper()} parsing failed: {e}") from e
