from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Articles Service"
    app_version: str = "0.1.0"
    app_env: str = "dev"
    cors_origins: list[str] = ["http://localhost:3000"]

    # AWS / DynamoDB
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = Field(
        "",
        validation_alias=AliasChoices("aws_region", "aws_default_region"),
    )
    dynamodb_endpoint_url: str = ""          # e.g. http://localhost:8000 for DynamoDB Local
    articles_table: str = "articles"
    articles_tag_index: str = "TagsIndex"    # provisioned outside this service

    # Remote log sink — disabled when empty
    logger_url: str = ""

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_aws: str = "WARNING"           # boto3 / botocore / urllib3
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() in {"prod", "production"}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
