"""Shared fixtures: in-memory stand-ins for the DynamoDB client and the repository port."""

import copy
import re
from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError

from articles_service.application.interfaces import ArticleRepository
from articles_service.domain.entities import Article, AuthorInfo, BulkDeleteResult
from articles_service.domain.exceptions import NotFoundError
from articles_service.infrastructure.dynamodb import DynamoDBArticleRepository


_KEY_CONDITION = re.compile(r"^\s*(#\w+)\s*=\s*(:\w+)\s*$")
_CONTAINS = re.compile(r"^\s*contains\(\s*(#\w+)\s*,\s*(:\w+)\s*\)\s*$")
_NOT_EXISTS = re.compile(r"^\s*attribute_not_exists\(\s*(#\w+)\s*\)\s*$")


def _validation_error(operation: str, message: str) -> ClientError:
    return ClientError({"Error": {"Code": "ValidationException", "Message": message}}, operation)


class InMemoryDynamoDBClient:
    """Dict-backed fake exposing the subset of the boto3 DynamoDB client we call.

    Global secondary indexes are sparse, as in DynamoDB: an item is visible
    through an index only when it carries the index's partition attribute.
    Supported expressions: ``#a = :v`` key conditions, ``contains(#a, :v)``
    and ``attribute_not_exists(#a)`` filters.
    """

    def __init__(self, indexes: dict[str, str] | None = None):
        self.tables: dict[str, dict[str, dict]] = {}
        self.indexes = indexes if indexes is not None else {"TagsIndex": "tag"}

    def _table(self, name: str) -> dict[str, dict]:
        return self.tables.setdefault(name, {})

    def put_item(self, TableName: str, Item: dict) -> dict:
        self._table(TableName)[Item["article_id"]["S"]] = copy.deepcopy(Item)
        return {}

    def get_item(self, TableName: str, Key: dict, **_: object) -> dict:
        item = self._table(TableName).get(Key["article_id"]["S"])
        return {"Item": copy.deepcopy(item)} if item else {}

    def delete_item(self, TableName: str, Key: dict) -> dict:
        self._table(TableName).pop(Key["article_id"]["S"], None)
        return {}

    @staticmethod
    def _matches_filter(item: dict, expression: str | None, names: dict, values: dict) -> bool:
        if expression is None:
            return True
        if match := _CONTAINS.match(expression):
            attribute = item.get(names[match.group(1)], {})
            return values[match.group(2)] in attribute.get("L", [])
        if match := _NOT_EXISTS.match(expression):
            return names[match.group(1)] not in item
        raise _validation_error("Scan", f"Unsupported filter expression: {expression}")

    def scan(
        self,
        TableName: str,
        FilterExpression: str | None = None,
        ExpressionAttributeNames: dict | None = None,
        ExpressionAttributeValues: dict | None = None,
    ) -> dict:
        items = [
            copy.deepcopy(i)
            for i in self._table(TableName).values()
            if self._matches_filter(
                i, FilterExpression, ExpressionAttributeNames or {}, ExpressionAttributeValues or {}
            )
        ]
        return {"Items": items, "Count": len(items)}

    def query(
        self,
        TableName: str,
        IndexName: str,
        KeyConditionExpression: str,
        ExpressionAttributeNames: dict,
        ExpressionAttributeValues: dict,
        FilterExpression: str | None = None,
    ) -> dict:
        if IndexName not in self.indexes:
            raise _validation_error("Query", f"The table does not have the specified index: {IndexName}")
        match = _KEY_CONDITION.match(KeyConditionExpression)
        if match is None:
            raise _validation_error("Query", f"Unsupported key condition: {KeyConditionExpression}")
        key_attribute = ExpressionAttributeNames[match.group(1)]
        if key_attribute != self.indexes[IndexName]:
            raise _validation_error("Query", f"Query condition missed key schema element: {key_attribute}")
        wanted = ExpressionAttributeValues[match.group(2)]

        items = [
            copy.deepcopy(i)
            for i in self._table(TableName).values()
            if i.get(key_attribute) == wanted
            and self._matches_filter(i, FilterExpression, ExpressionAttributeNames, ExpressionAttributeValues)
        ]
        return {"Items": items, "Count": len(items)}


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[str, Article] = {}

    async def create_article(self, article: Article) -> Article:
        self._articles[article.article_id] = article
        return article

    async def get_article_by_id(self, article_id: str) -> Article:
        if article_id not in self._articles:
            raise NotFoundError("Article", article_id)
        return self._articles[article_id]

    async def get_articles_by_author(self, author_id: str) -> list[Article]:
        return [a for a in self._articles.values() if a.author.author_id == author_id]

    async def get_articles_by_tag(self, tag: str) -> list[Article]:
        return [a for a in self._articles.values() if tag in a.tags]

    async def get_articles(self) -> list[Article]:
        return list(self._articles.values())

    async def update_article(self, article: Article) -> Article:
        self._articles[article.article_id] = article
        return self._articles[article.article_id]

    async def delete_article(self, article_id: str) -> None:
        self._articles.pop(article_id, None)

    async def delete_article_all(self) -> BulkDeleteResult:
        result = BulkDeleteResult(deleted_ids=list(self._articles))
        self._articles.clear()
        return result


def make_article(
    article_id: str = "a1",
    title: str = "T",
    tags: list[str] | None = None,
    author_id: str = "author-1",
) -> Article:
    return Article(
        article_id=article_id,
        title=title,
        subtitle="Sub",
        introduction="Intro",
        body="Body text",
        tags=list(tags or []),
        publish_date=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        author=AuthorInfo(author_id=author_id, firstname="Ada", lastname="Lovelace", handle="ada"),
    )


@pytest.fixture
def article_factory():
    return make_article


@pytest.fixture
def fake_repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def dynamodb_client() -> InMemoryDynamoDBClient:
    return InMemoryDynamoDBClient()


@pytest.fixture
def dynamodb_repository(dynamodb_client: InMemoryDynamoDBClient) -> DynamoDBArticleRepository:
    return DynamoDBArticleRepository(dynamodb_client, table_name="articles", tag_index_name="TagsIndex")
