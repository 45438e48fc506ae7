"""
Test Configuration and Fixtures
"""
import fitz
import pytest
from fastapi.testclient import TestClient

from legalaid.config import Settings
from legalaid.errors import CompletionFailure
from legalaid.main import create_app


class FakeCompletionClient:
    """Records prompts and returns a canned reply instead of calling Gemini."""

    def __init__(self, reply="Generated text", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    async def generate_async(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise CompletionFailure(details=self.error)
        return self.reply


def build_pdf(*pages):
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    """Factory building an in-memory PDF with one page per text argument."""
    return build_pdf


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir, tmp_path):
    return Settings(
        gemini_api_key="test-key",
        app_env="development",
        upload_dir=upload_dir,
        static_dir=tmp_path / "no-public",
    )


@pytest.fixture
def completion():
    return FakeCompletionClient()


@pytest.fixture
def app(settings, completion):
    return create_app(settings=settings, completion=completion)


@pytest.fixture
def client(app):
    """Test client; the lifespan is not run so the injected fake is kept."""
    return TestClient(app, raise_server_exceptions=False)
