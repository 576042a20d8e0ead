"""Concrete ArticleRepository backed by a DynamoDB table.

Item layout. Every article is one *article item* keyed by its ``article_id``::

    article_id    S
    title         S
    subtitle      S
    introduction  S
    body          S
    tags          L of S
    publish_date  S  (ISO-8601)
    author_info   M  (author_id, firstname, lastname, handle, about, profile_image)

Each distinct tag of an article adds one *tag item* to the same table. It is a
copy of the article item plus the index key::

    article_id         S  "<article_id>#tag#<tag>"
    tag                S  partition key of the tag index
    tagged_article_id  S  the owning article's id

The global secondary index partitioned by ``tag`` is provisioned outside this
service. Only tag items carry ``tag``, so only they appear in the index, and
scans exclude them with ``attribute_not_exists(tag)``.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import asdict
from datetime import datetime
from typing import Any

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from articles_service.application.interfaces import ArticleRepository
from articles_service.domain.entities import Article, AuthorInfo, BulkDeleteResult
from articles_service.domain.exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()

Item = dict[str, dict[str, Any]]

TAG_ATTRIBUTE = "tag"
TAG_OWNER_ATTRIBUTE = "tagged_article_id"


def tag_item_key(article_id: str, tag: str) -> str:
    return f"{article_id}#tag#{tag}"


def article_to_item(article: Article) -> Item:
    """Map domain entity → DynamoDB attribute-value item."""
    if not isinstance(article.article_id, str) or not article.article_id:
        raise StoreError("marshal", "article_id must be a non-empty string")
    plain: dict[str, Any] = {
        "article_id": article.article_id,
        "title": article.title,
        "subtitle": article.subtitle,
        "introduction": article.introduction,
        "body": article.body,
        "tags": list(article.tags),
        "publish_date": article.publish_date.isoformat(),
        "author_info": asdict(article.author),
    }
    try:
        return {key: _serializer.serialize(value) for key, value in plain.items()}
    except (TypeError, AttributeError) as exc:
        raise StoreError("marshal", f"Cannot encode article '{article.article_id}': {exc}") from exc


def article_to_tag_items(article: Article) -> list[Item]:
    """Build one index-visible item per distinct tag of ``article``."""
    base = article_to_item(article)
    items = []
    for tag in dict.fromkeys(article.tags):
        item = dict(base)
        item["article_id"] = {"S": tag_item_key(article.article_id, tag)}
        item[TAG_ATTRIBUTE] = {"S": tag}
        item[TAG_OWNER_ATTRIBUTE] = {"S": article.article_id}
        items.append(item)
    return items


def item_to_article(item: Item) -> Article:
    """Map an article item or tag item → domain entity."""
    try:
        plain = {key: _deserializer.deserialize(value) for key, value in item.items()}
        author = plain.get("author_info") or {}
        tags = plain.get("tags") or []
        return Article(
            article_id=plain.get(TAG_OWNER_ATTRIBUTE) or plain["article_id"],
            title=plain.get("title") or "",
            subtitle=plain.get("subtitle") or "",
            introduction=plain.get("introduction") or "",
            body=plain.get("body") or "",
            tags=sorted(tags) if isinstance(tags, set) else list(tags),
            publish_date=datetime.fromisoformat(plain["publish_date"]),
            author=AuthorInfo(
                author_id=author.get("author_id") or "",
                firstname=author.get("firstname") or "",
                lastname=author.get("lastname") or "",
                handle=author.get("handle") or "",
                about=author.get("about") or "",
                profile_image=author.get("profile_image") or "",
            ),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise StoreError("unmarshal", f"Malformed article item: {exc!r}") from exc


class DynamoDBArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port on top of a boto3 DynamoDB client.

    boto3 is blocking, so each call runs in a worker thread. Writes touch the
    article item and its tag items one by one; nothing here is transactional.
    """

    def __init__(self, client: BaseClient, table_name: str, tag_index_name: str = "TagsIndex"):
        self._client = client
        self._table_name = table_name
        self._tag_index_name = tag_index_name

    async def _call(self, operation: str, method: Callable[..., dict], **kwargs: Any) -> dict:
        """Run one store call off the event loop, translating client errors."""
        logger.debug("DynamoDB %s on %s", operation, self._table_name)
        try:
            return await asyncio.to_thread(method, **kwargs)
        except (ClientError, BotoCoreError) as exc:
            logger.error("DynamoDB %s failed on %s: %s", operation, self._table_name, exc)
            raise StoreError(operation, str(exc)) from exc

    def _key(self, key: str) -> Item:
        return {"article_id": {"S": key}}

    async def _get_item(self, key: str) -> Item | None:
        response = await self._call(
            "get_item",
            self._client.get_item,
            TableName=self._table_name,
            Key=self._key(key),
        )
        return response.get("Item") or None

    async def _stored_tags(self, article_id: str) -> list[str]:
        """Tags of the article item currently stored under ``article_id``."""
        item = await self._get_item(article_id)
        if item is None or TAG_ATTRIBUTE in item:
            return []
        return item_to_article(item).tags

    async def _delete_item(self, key: str) -> None:
        await self._call(
            "delete_item",
            self._client.delete_item,
            TableName=self._table_name,
            Key=self._key(key),
        )

    async def _put(self, article: Article) -> None:
        item = article_to_item(article)
        tag_items = article_to_tag_items(article)
        previous_tags = await self._stored_tags(article.article_id)

        await self._call("put_item", self._client.put_item, TableName=self._table_name, Item=item)
        for tag_item in tag_items:
            await self._call("put_item", self._client.put_item, TableName=self._table_name, Item=tag_item)
        for tag in dict.fromkeys(previous_tags):
            if tag not in article.tags:
                await self._delete_item(tag_item_key(article.article_id, tag))

    async def create_article(self, article: Article) -> Article:
        await self._put(article)
        logger.info("Stored article %s", article.article_id)
        return article

    async def get_article_by_id(self, article_id: str) -> Article:
        item = await self._get_item(article_id)
        if item is None or TAG_ATTRIBUTE in item:
            raise NotFoundError("Article", article_id)
        return item_to_article(item)

    async def get_articles_by_author(self, author_id: str) -> list[Article]:
        # Client-side filter over a full scan; fine while the table stays small.
        articles = await self.get_articles()
        return [a for a in articles if a.author.author_id == author_id]

    async def get_articles_by_tag(self, tag: str) -> list[Article]:
        response = await self._call(
            "query",
            self._client.query,
            TableName=self._table_name,
            IndexName=self._tag_index_name,
            KeyConditionExpression="#tag = :tag",
            FilterExpression="contains(#tags, :tag)",
            ExpressionAttributeNames={"#tag": TAG_ATTRIBUTE, "#tags": "tags"},
            ExpressionAttributeValues={":tag": {"S": tag}},
        )
        return [item_to_article(item) for item in response.get("Items", [])]

    async def get_articles(self) -> list[Article]:
        response = await self._call(
            "scan",
            self._client.scan,
            TableName=self._table_name,
            FilterExpression="attribute_not_exists(#tag)",
            ExpressionAttributeNames={"#tag": TAG_ATTRIBUTE},
        )
        if response.get("LastEvaluatedKey"):
            logger.warning(
                "Scan of %s was truncated by the store; only the first page is returned",
                self._table_name,
            )
        return [item_to_article(item) for item in response.get("Items", [])]

    async def update_article(self, article: Article) -> Article:
        await self._put(article)
        logger.info("Replaced article %s", article.article_id)
        return await self.get_article_by_id(article.article_id)

    async def delete_article(self, article_id: str) -> None:
        for tag in dict.fromkeys(await self._stored_tags(article_id)):
            await self._delete_item(tag_item_key(article_id, tag))
        await self._delete_item(article_id)
        logger.info("Deleted article %s", article_id)

    async def delete_article_all(self) -> BulkDeleteResult:
        articles = await self.get_articles()
        result = BulkDeleteResult()
        for article in articles:
            try:
                await self.delete_article(article.article_id)
            except StoreError:
                result.failed_ids.append(article.article_id)
            else:
                result.deleted_ids.append(article.article_id)
        logger.info(
            "Bulk delete finished: %d deleted, %d failed",
            len(result.deleted_ids),
            len(result.failed_ids),
        )
        return result
