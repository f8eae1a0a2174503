from datetime import datetime, timezone

from news_service.core.config import settings
from news_service.core.repository import BaseRepository
from news_service.modules.news.models import NewsCategory
from news_service.modules.news.schemas import NewsArticle


def _sample_row(news_id: int, title: str) -> dict:
    return {
        "id": news_id,
        "title": title,
        "content": "Content",
        "publicationDate": datetime.now(timezone.utc),
        "author": "Author",
        "category": NewsCategory.POLITICS,
        "tags": ["Tag1", "Tag2"],
        "sourceUrl": settings.SAMPLE_SOURCE_URL,
    }


class NewsRepository(BaseRepository):
    schema = NewsArticle

    def _rows(self) -> list[dict]:
        return [
            _sample_row(1, "Test 1"),
            _sample_row(2, "Test 2"),
        ]

    async def get_article_for(self, news_id: int) -> NewsArticle:
        # Статья собирается под любой id, "не найдено" не бывает
        return self._validate(_sample_row(news_id, f"Test - {news_id}"))
