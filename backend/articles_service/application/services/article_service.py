"""Application service (use case) for Article operations."""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from articles_service.application.interfaces import ArticleRepository
from articles_service.application.schemas import ArticleCreate, ArticleUpdate
from articles_service.domain.entities import Article, AuthorInfo, BulkDeleteResult

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article operations. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: str) -> Article:
        return await self._repository.get_article_by_id(article_id)

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_articles()

    async def list_articles_by_author(self, author_id: str) -> list[Article]:
        return await self._repository.get_articles_by_author(author_id)

    async def list_articles_by_tag(self, tag: str) -> list[Article]:
        return await self._repository.get_articles_by_tag(tag)

    async def create_article(self, data: ArticleCreate) -> Article:
        article = self._build_article(str(uuid4()), data)
        return await self._repository.create_article(article)

    async def update_article(self, article_id: str, data: ArticleUpdate) -> Article:
        """Replace the article stored under ``article_id`` with ``data``."""
        article = self._build_article(article_id, data)
        return await self._repository.update_article(article)

    async def delete_article(self, article_id: str) -> None:
        await self._repository.delete_article(article_id)

    async def delete_all_articles(self) -> BulkDeleteResult:
        result = await self._repository.delete_article_all()
        if result.failed_ids:
            logger.warning(
                "Bulk delete left %d article(s) behind: %s",
                len(result.failed_ids),
                ", ".join(result.failed_ids),
            )
        return result

    @staticmethod
    def _build_article(article_id: str, data: ArticleCreate) -> Article:
        return Article(
            article_id=article_id,
            title=data.title,
            subtitle=data.subtitle,
            introduction=data.introduction,
            body=data.body,
            tags=list(data.tags),
            publish_date=data.publish_date or datetime.now(timezone.utc),
            author=AuthorInfo(**data.author.model_dump()),
        )
