"""Application configuration.

Environment variables override all defaults. A `.env` file next to the
backend package is loaded for local development.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

_BACKEND_DIR = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_BACKEND_DIR / ".env", override=False)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Database Configuration (same file name the handheld app used)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./inventory.db")

    # Namespace of content:// addresses, e.g. content://<authority>/drugs/3
    CONTENT_AUTHORITY: str = os.getenv("CONTENT_AUTHORITY", "com.example.android.pharmacyinventory")

    # Insert the sample drug on startup when the table is empty
    SEED_SAMPLE_DATA: bool = _env_flag("SEED_SAMPLE_DATA")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info").lower()

    # Where run_server.py binds uvicorn
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    if ENVIRONMENT == "production" and ":memory:" in DATABASE_URL:
        raise ValueError(
            "DATABASE_URL points at an in-memory database; inventory would be lost on restart. "
            "Set DATABASE_URL to a file or server database in production."
        )


settings = Settings()
