"""FastAPI routes package."""

from legalaid.routes.chat import router as chat_router
from legalaid.routes.documents import router as documents_router
from legalaid.routes.health import router as health_router
from legalaid.routes.training_files import router as training_files_router

__all__ = ["chat_router", "documents_router", "health_router", "training_files_router"]
