from datetime import date
from typing import Annotated

from fastapi import Depends, Query

from news_service.modules.news.models import NewsCategory
from news_service.modules.news.schemas import INT32_MAX, INT32_MIN, NewsFilterParams


async def get_news_filters(
    category: Annotated[NewsCategory | None, Query(description="Категория новости")] = None,
    publication_date: Annotated[date | None, Query(alias="publicationDate", description="Формат: YYYY-MM-DD")] = None,
    limit: Annotated[int | None, Query(ge=INT32_MIN, le=INT32_MAX, description="Кол-во элементов")] = None,
    offset: Annotated[int | None, Query(ge=INT32_MIN, le=INT32_MAX, description="Смещение")] = None,
) -> NewsFilterParams:
    return NewsFilterParams(
        category=category,
        publication_date=publication_date,
        limit=limit,
        offset=offset,
    )


NewsFilterDep = Annotated[NewsFilterParams, Depends(get_news_filters)]
