from typing import Annotated

from fastapi import APIRouter, Path

from news_service.core.dependencies import NewsFilterDep
from news_service.modules.news.service import NewsService
from news_service.modules.news.schemas import INT64_MAX, INT64_MIN, NewsArticle


router = APIRouter(prefix="/news", tags=["News"])


@router.get("", response_model=list[NewsArticle])
async def list_news(filters: NewsFilterDep):
    service = NewsService()
    return await service.list_news(filters)


@router.get("/{id}", response_model=NewsArticle)
async def get_news(news_id: Annotated[int, Path(alias="id", ge=INT64_MIN, le=INT64_MAX)]):
    service = NewsService()
    return await service.get_news(news_id)
