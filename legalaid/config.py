"""Runtime configuration read from the process environment (and `.env`)."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

MAX_UPLOAD_BYTES = 5 * 1024 * 1024
DEFAULT_MODEL = "models/gemini-2.5-flash"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL
    host: str = "0.0.0.0"
    port: int = 3000
    app_env: str = "production"
    upload_dir: Path = Path("uploads")
    static_dir: Path = Path("public")
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    log_level: str = "INFO"

    @property
    def expose_error_details(self) -> bool:
        return self.app_env != "production"

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "Settings":
        load_dotenv(env_file)
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            app_env=os.getenv("APP_ENV", "production").strip().lower(),
            upload_dir=Path(os.getenv("UPLOAD_DIR", "uploads")),
            static_dir=Path(os.getenv("STATIC_DIR", "public")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
