"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class AuthorInfoSchema(BaseModel):
    """Embedded author reference."""

    author_id: str = Field(..., min_length=1, examples=["author-42"])
    firstname: str = ""
    lastname: str = ""
    handle: str = ""
    about: str = ""
    profile_image: str = ""

    model_config = {"from_attributes": True}


class ArticleCreate(BaseModel):
    """Schema for creating a new article. The id is assigned server-side."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    subtitle: str = Field("", max_length=255)
    introduction: str = ""
    body: str = ""
    tags: list[str] = Field(default_factory=list, examples=[["python", "aws"]])
    publish_date: datetime | None = None
    author: AuthorInfoSchema


class ArticleUpdate(ArticleCreate):
    """Schema for replacing an article — every field is written, none patched."""


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    article_id: str
    title: str
    subtitle: str
    introduction: str
    body: str
    tags: list[str]
    publish_date: datetime
    author: AuthorInfoSchema

    model_config = {"from_attributes": True}


class BulkDeleteResponse(BaseModel):
    """Outcome of a delete-all request."""

    deleted_ids: list[str]
    failed_ids: list[str]

    model_config = {"from_attributes": True}
