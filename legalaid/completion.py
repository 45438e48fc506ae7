"""Gemini completion client: one prompt in, one block of generated text out."""

import asyncio
import logging
from typing import Any, Optional

import google.genai as genai

from legalaid.config import DEFAULT_MODEL
from legalaid.errors import CompletionFailure
from legalaid.logging_config import log_latency

logger = logging.getLogger(__name__)


class CompletionClient:
    def __init__(self, api_key: Optional[str], model: str = DEFAULT_MODEL, client: Any = None):
        if client is None and api_key:
            client = genai.Client(api_key=api_key)

        self.client = client
        self.model = model
        if self.client is None:
            logger.warning("GEMINI_API_KEY not found in environment; completion requests will fail")
        else:
            logger.info(f"CompletionClient initialized | model={self.model}")

    def _text_from(self, response: Any) -> str:
        text = getattr(response, "text", None)
        if not isinstance(text, str) or not text.strip():
            raise CompletionFailure(details="Model returned no text")
        return text

    @log_latency("completion.generate")
    def generate(self, prompt: str) -> str:
        if self.client is None:
            raise CompletionFailure(details="GEMINI_API_KEY not set")

        logger.info(f"Completion requested | prompt_length={len(prompt)}")
        try:
            response = self.client.models.generate_content(model=self.model, contents=prompt)
        except Exception as e:
            raise CompletionFailure(details=str(e)) from e

        text = self._text_from(response)
        logger.info(f"Completion received | text_length={len(text)}")
        return text

    async def generate_async(self, prompt: str) -> str:
        return await asyncio.to_thread(self.generate, prompt)
