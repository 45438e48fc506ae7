"""Legal document drafting endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from legalaid.completion import CompletionClient
from legalaid.dependencies import get_completion_client
from legalaid.errors import CompletionFailure, MissingField
from legalaid.prompts import build_document_prompt

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


class DocumentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    document_type: Optional[str] = Field(default=None, alias="documentType")
    details: Optional[str] = None


@router.post("/generate-document")
async def generate_document(
    payload: Optional[DocumentRequest] = None,
    completion: CompletionClient = Depends(get_completion_client),
):
    payload = payload or DocumentRequest()
    if not payload.document_type or not payload.details:
        raise MissingField("Document type and details are required")

    prompt = build_document_prompt(payload.document_type, payload.details)
    try:
        text = await completion.generate_async(prompt)
    except CompletionFailure as e:
        logger.error(f"Document generation error: {e.details}")
        raise CompletionFailure("Failed to generate document", details=e.details) from e

    return {"document": text}
