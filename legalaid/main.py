"""FastAPI application entrypoint with completion client lifecycle management."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from legalaid.completion import CompletionClient
from legalaid.config import Settings
from legalaid.errors import LegalAidError
from legalaid.logging_config import setup_logging
from legalaid.routes import chat_router, documents_router, health_router, training_files_router
from legalaid.storage import TempFileStore

logger = logging.getLogger(__name__)


def error_response(settings: Settings, status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = {"error": error}
    if details is not None and settings.expose_error_details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info(f"Gemini API key status: {'Present' if settings.gemini_api_key else 'Missing'}")
    if app.state.completion is None:
        app.state.completion = CompletionClient(settings.gemini_api_key, settings.gemini_model)
    logger.info(f"Server running at http://{settings.host}:{settings.port} | env={settings.app_env}")
    yield
    logger.info("Server shutting down")


def create_app(settings: Optional[Settings] = None, completion: Optional[CompletionClient] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="LegalAid", lifespan=lifespan)
    app.state.settings = settings
    app.state.completion = completion
    app.state.file_store = TempFileStore(settings.upload_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(LegalAidError)
    async def legalaid_error_handler(request: Request, exc: LegalAidError):
        log = logger.warning if exc.status_code < 500 else logger.error
        log(f"{request.method} {request.url.path} | status={exc.status_code} | error={exc.message} | details={exc.details}")
        return error_response(settings, exc.status_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"{request.method} {request.url.path} | invalid body | errors={exc.errors()}")
        return error_response(settings, 400, "Invalid request body", str(exc))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Server error | {request.method} {request.url.path}")
        return error_response(settings, 500, "Internal server error", str(exc))

    app.include_router(health_router)
    app.include_router(documents_router)
    app.include_router(chat_router)
    app.include_router(training_files_router)

    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.static_dir), html=True), name="static")
    else:
        @app.get("/", include_in_schema=False)
        async def root():
            return RedirectResponse(url="/docs")

    return app


app = create_app()


def run():
    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
