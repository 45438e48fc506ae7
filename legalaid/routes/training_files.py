"""Training file upload: filter, store, extract text, delete."""

import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, File, UploadFile

from legalaid.config import Settings
from legalaid.dependencies import get_file_store, get_settings
from legalaid.errors import ExtractionError, LegalAidError, NoFilesUploaded
from legalaid.extraction import extract_text
from legalaid.storage import TempFileStore
from legalaid.uploads import check_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["training-files"])


async def read_accepted_uploads(files: List[UploadFile], max_bytes: int) -> List[Tuple[str, str, bytes]]:
    """Read and filter every upload in the batch before any of them is stored."""
    accepted = []
    for upload in files:
        data = await upload.read(max_bytes + 1)
        try:
            check_upload(upload.content_type, len(data), max_bytes)
        except LegalAidError as e:
            logger.warning(f"Upload rejected | filename={upload.filename} | reason={e.details}")
            raise
        accepted.append((upload.filename or "upload", upload.content_type, data))
    return accepted


async def process_file(store: TempFileStore, filename: str, mime_type: str, data: bytes) -> Dict:
    with store.stored(filename, data) as path:
        try:
            content = await asyncio.to_thread(extract_text, path, mime_type)
        except ExtractionError as e:
            logger.error(f"Error processing file {filename}: {e.details}")
            return {"filename": filename, "error": e.message}

    logger.info(f"File processed | filename={filename} | content_length={len(content)}")
    return {"filename": filename, "content": content, "size": len(data)}


@router.post("/upload-training-files")
async def upload_training_files(
    files: Optional[List[UploadFile]] = File(default=None),
    store: TempFileStore = Depends(get_file_store),
    settings: Settings = Depends(get_settings),
):
    if not files:
        raise NoFilesUploaded()

    accepted = await read_accepted_uploads(files, settings.max_upload_bytes)

    processed = []
    try:
        for filename, mime_type, data in accepted:
            processed.append(await process_file(store, filename, mime_type, data))
    except LegalAidError:
        raise
    except Exception as e:
        logger.exception("Error handling file upload")
        raise LegalAidError("Failed to process files", details=str(e)) from e

    return {
        "success": True,
        "message": "Files processed successfully",
        "processedFiles": processed,
    }
