from .article_repository import (
    DynamoDBArticleRepository,
    article_to_item,
    article_to_tag_items,
    item_to_article,
    tag_item_key,
)
from .client import create_dynamodb_client

__all__ = [
    "DynamoDBArticleRepository",
    "article_to_item",
    "article_to_tag_items",
    "item_to_article",
    "tag_item_key",
    "create_dynamodb_client",
]
