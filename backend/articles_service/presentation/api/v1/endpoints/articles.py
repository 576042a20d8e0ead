"""Article CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from articles_service.application.schemas import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    BulkDeleteResponse,
)
from articles_service.application.services import ArticleService
from articles_service.domain.exceptions import NotFoundError
from articles_service.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article."""
    articles = await service.list_articles()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article with a server-assigned id."""
    article = await service.create_article(data)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("", response_model=BulkDeleteResponse)
async def delete_all_articles(
    service: ArticleService = Depends(get_article_service),
) -> BulkDeleteResponse:
    """Delete every article, reporting ids that could not be deleted."""
    result = await service.delete_all_articles()
    return BulkDeleteResponse.model_validate(result, from_attributes=True)


@router.get("/author/{author_id}", response_model=list[ArticleResponse])
async def list_articles_by_author(
    author_id: str,
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article written by an author."""
    articles = await service.list_articles_by_author(author_id)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/tag/{tag}", response_model=list[ArticleResponse])
async def list_articles_by_tag(
    tag: str,
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article carrying a tag."""
    articles = await service.list_articles_by_tag(tag)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Replace an article and return what the store now holds."""
    try:
        article = await service.update_article(article_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID. Deleting an unknown ID succeeds."""
    await service.delete_article(article_id)
