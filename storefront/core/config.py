"""
Centralised application settings loaded from environment / .env file.

Uses pydantic-settings so every value can be overridden via env vars
or the .env file at the project root.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Project ──────────────────────────────────────────────────────
    PROJECT_NAME: str = "Storefront API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # ── Database (in-memory SQLite by default, any async URL works) ─
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"

    # ── CORS ─────────────────────────────────────────────────────────
    CORS_ORIGINS: list[str] = [
        "http://localhost",
        "http://localhost:8080",
        "http://127.0.0.1",
        "http://127.0.0.1:8080",
    ]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v  # type: ignore[return-value]

    # ── Server ───────────────────────────────────────────────────────
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    # ── Logging ──────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ── Catalogue rules ──────────────────────────────────────────────
    LOW_STOCK_THRESHOLD: int = 10
    RECENT_PRODUCTS_DAYS: int = 7

    # ── Sample data (seeded on startup into empty tables) ───────────
    SEED_SAMPLE_DATA: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


settings = Settings()
