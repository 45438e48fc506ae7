"""Upload filter: MIME type allow-list and size limit, checked before anything is stored."""

from typing import Optional

from legalaid.config import MAX_UPLOAD_BYTES
from legalaid.errors import FileTooLarge, UnsupportedFileType

PDF = "application/pdf"
DOC = "application/msword"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ALLOWED_TYPES = frozenset({PDF, DOC, DOCX})


def check_upload(content_type: Optional[str], size: int, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    if content_type not in ALLOWED_TYPES:
        raise UnsupportedFileType(details=f"Rejected content type: {content_type}")
    if size > max_bytes:
        raise FileTooLarge(details=f"{size} bytes exceeds the {max_bytes} byte limit")
