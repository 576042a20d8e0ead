from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    AuthorInfoSchema,
    BulkDeleteResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "AuthorInfoSchema",
    "BulkDeleteResponse",
]
