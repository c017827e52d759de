"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Requirement Analyzer"
    debug: bool = False

    # ── Analysis ─────────────────────────────────────────
    # Delay before a submitted analysis resolves (the web UI used 1.8s)
    simulated_latency_seconds: float = 0.0

    # ── Export ───────────────────────────────────────────
    export_filename_prefix: str = "Technical_Design_Doc"

    # ── API server ───────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = ["*"]

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
