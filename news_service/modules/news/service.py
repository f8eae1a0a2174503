import logging

from news_service.modules.news.repository import NewsRepository
from news_service.modules.news.schemas import NewsArticle, NewsFilterParams


logger = logging.getLogger(__name__)


class NewsService:
    def __init__(self):
        self.repo = NewsRepository()

    async def list_news(self, filters: NewsFilterParams) -> list[NewsArticle]:
        # Фильтры и пагинация принимаются, но к тестовым данным не применяются
        logger.debug("list_news filters=%s", filters.model_dump(exclude_none=True))
        return await self.repo.get_all()

    async def get_news(self, news_id: int) -> NewsArticle:
        logger.debug("get_news id=%s", news_id)
        return await self.repo.get_article_for(news_id)
