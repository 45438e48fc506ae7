"""FastAPI dependencies that hand app-scoped collaborators to route handlers."""

from fastapi import Request

from legalaid.completion import CompletionClient
from legalaid.config import Settings
from legalaid.storage import TempFileStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion


def get_file_store(request: Request) -> TempFileStore:
    return request.app.state.file_store
