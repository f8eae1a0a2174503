from enum import Enum


class NewsCategory(str, Enum):
    POLITICS = "politics"
    ECONOMY = "economy"
    SPORTS = "sports"
    TECHNOLOGY = "technology"
    SCIENCE = "science"
    CULTURE = "culture"
