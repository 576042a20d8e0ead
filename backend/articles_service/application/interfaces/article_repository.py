"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from articles_service.domain.entities import Article, BulkDeleteResult


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Every operation targets a single logical table keyed by ``article_id``.
    """

    @abstractmethod
    async def create_article(self, article: Article) -> Article:
        """Persist an article, overwriting any item with the same id."""
        ...

    @abstractmethod
    async def get_article_by_id(self, article_id: str) -> Article:
        """Retrieve a single article. Raises NotFoundError when absent."""
        ...

    @abstractmethod
    async def get_articles_by_author(self, author_id: str) -> list[Article]:
        """Retrieve every article written by the given author."""
        ...

    @abstractmethod
    async def get_articles_by_tag(self, tag: str) -> list[Article]:
        """Retrieve every article carrying the given tag."""
        ...

    @abstractmethod
    async def get_articles(self) -> list[Article]:
        """Retrieve all articles, in store-defined order."""
        ...

    @abstractmethod
    async def update_article(self, article: Article) -> Article:
        """Replace an article wholesale and return the stored value."""
        ...

    @abstractmethod
    async def delete_article(self, article_id: str) -> None:
        """Delete an article. Deleting a missing id is not an error."""
        ...

    @abstractmethod
    async def delete_article_all(self) -> BulkDeleteResult:
        """Delete every article one by one, reporting ids that failed."""
        ...
