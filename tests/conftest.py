import pytest
from fastapi.testclient import TestClient

from news_service.main import create_app


@pytest.fixture
def client():
    """FastAPI test client, lifespan included."""
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def article_payload():
    """A valid article in wire (camelCase) form."""
    return {
        "id": 10,
        "title": "Budget vote",
        "content": "Parliament passed the budget.",
        "publicationDate": "2024-05-01T12:30:00+02:00",
        "author": "Jane Roe",
        "category": "economy",
        "tags": ["budget", "parliament"],
        "sourceUrl": "https://news.example.org/budget",
    }
