"""Plain-text extraction for uploaded training files."""

import logging
from pathlib import Path

import fitz

from legalaid.errors import ExtractionError
from legalaid.logging_config import log_latency
from legalaid.uploads import PDF

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


@log_latency("extraction.pdf")
def extract_pdf_text(path: Path) -> str:
    try:
        with fitz.open(str(path)) as doc:
            return PAGE_SEPARATOR.join(page.get_text("text") for page in doc)
    except Exception as e:
        raise ExtractionError(details=str(e)) from e


def extract_text(path: Path, mime_type: str) -> str:
    if mime_type == PDF:
        return extract_pdf_text(path)

    # TODO: Word extraction is accepted by the upload filter but not implemented;
    # waiting on a product decision between adding a .doc/.docx parser and dropping Word support.
    logger.warning(f"Skipping text extraction for Word document | path={Path(path).name}")
    return ""
