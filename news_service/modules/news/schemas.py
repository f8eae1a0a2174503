from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime

from news_service.modules.news.models import NewsCategory


INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
INT64_MIN, INT64_MAX = -2**63, 2**63 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class NewsArticle(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Int64
    title: str
    content: str
    publication_date: datetime = Field(..., alias="publicationDate")
    author: str
    category: NewsCategory
    tags: list[str]
    source_url: str = Field(..., alias="sourceUrl")


class NewsFilterParams(BaseModel):
    category: NewsCategory | None = None
    publication_date: date | None = None
    limit: Int32 | None = None
    offset: Int32 | None = None
