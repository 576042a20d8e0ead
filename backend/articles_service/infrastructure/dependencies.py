"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from botocore.client import BaseClient
from fastapi import Request

from articles_service.application.interfaces import ArticleRepository
from articles_service.application.services import ArticleService
from articles_service.config import Settings
from articles_service.infrastructure.dynamodb import (
    DynamoDBArticleRepository,
    create_dynamodb_client,
)


def build_article_repository(
    settings: Settings,
    client: BaseClient | None = None,
) -> ArticleRepository:
    """Build the DynamoDB-backed repository. Raises ConfigError on bad settings."""
    return DynamoDBArticleRepository(
        client=client or create_dynamodb_client(settings),
        table_name=settings.articles_table,
        tag_index_name=settings.articles_tag_index,
    )


def get_article_repository(request: Request) -> ArticleRepository:
    """Returns the repository built during application startup."""
    return request.app.state.article_repository


async def get_article_service(request: Request) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(get_article_repository(request))
