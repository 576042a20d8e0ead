from .article import Article, AuthorInfo, BulkDeleteResult

__all__ = [
    "Article",
    "AuthorInfo",
    "BulkDeleteResult",
]
