"""Single-turn legal Q&A endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from legalaid.completion import CompletionClient
from legalaid.dependencies import get_completion_client
from legalaid.errors import CompletionFailure, MissingField
from legalaid.prompts import build_chat_prompt

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


class ChatRequest(BaseModel):
    message: Optional[str] = None


@router.post("/chat")
async def chat(
    payload: Optional[ChatRequest] = None,
    completion: CompletionClient = Depends(get_completion_client),
):
    if payload is None or not payload.message:
        raise MissingField("Message is required")

    try:
        text = await completion.generate_async(build_chat_prompt(payload.message))
    except CompletionFailure as e:
        logger.error(f"Chat error: {e.details}")
        raise CompletionFailure("Failed to process your question. Please try again.", details=e.details) from e

    return {"response": text, "status": "success"}
