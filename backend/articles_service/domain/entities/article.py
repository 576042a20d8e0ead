"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class AuthorInfo:
    """Embedded author reference stored alongside each article."""

    author_id: str
    firstname: str = ""
    lastname: str = ""
    handle: str = ""
    about: str = ""
    profile_image: str = ""


@dataclass
class Article:
    """Core domain entity representing a published article.

    ``article_id`` is assigned once at creation and never changes; updates
    replace every other field wholesale.
    """

    title: str
    author: AuthorInfo
    subtitle: str = ""
    introduction: str = ""
    body: str = ""
    tags: list[str] = field(default_factory=list)
    article_id: str = field(default_factory=lambda: str(uuid4()))
    publish_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class BulkDeleteResult:
    """Outcome of deleting every article one item at a time."""

    deleted_ids: list[str] = field(default_factory=list)
    failed_ids: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failed_ids
