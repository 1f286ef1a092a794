"""Engine configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `ACADEMIC_ENGINE_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Academic engine settings.

    All fields are environment-configurable. Prefix is `ACADEMIC_ENGINE_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ACADEMIC_ENGINE_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # Storage
    store_backend: Literal["file", "memory", "redis"] = Field(default="file")
    data_dir: Path = Field(default=Path("data"))
    # 0 disables the quota check
    store_max_bytes: int = Field(default=0, ge=0)
    citations_collection: str = Field(default="citations")
    outlines_collection: str = Field(default="paper_outlines")

    redis_url: str = Field(default="redis://localhost:6379/0")
    redis_key_prefix: str = Field(default="academic_engine")

    # Analysis provider
    provider: Literal["heuristic", "openai"] = Field(default="heuristic")
    openai_api_key: str | None = Field(default=None)
    openai_base_url: str | None = Field(default=None)
    openai_model: str = Field(default="gpt-4o-mini")
    openai_timeout_s: float = Field(default=60.0, gt=0.0)

    # Keyword extraction
    document_keyword_count: int = Field(default=5, ge=1, le=50)
    standalone_keyword_count: int = Field(default=8, ge=1, le=50)

    # Input limits
    min_document_chars: int = Field(default=50, ge=0)
    min_paragraph_chars: int = Field(default=20, ge=0)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("ACADEMIC_ENGINE_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
