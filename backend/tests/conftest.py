import pytest
import sys
from pathlib import Path
from typing import List
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))

from models.evidence import EvidenceItem, SourceCategory
from sources.base import SourceProvider


class FakeProvider(SourceProvider):
    """Provider returning canned items for claims containing `trigger`."""

    def __init__(self, name: str, category: SourceCategory, reliability: float,
                 items: List[EvidenceItem], trigger: str = ""):
        self.name = name
        self.category = category
        self.reliability = reliability
        self.items = items
        self.trigger = trigger
        self.queries: List[str] = []

    async def _search(self, query: str) -> List[EvidenceItem]:
        self.queries.append(query)
        if self.trigger and self.trigger not in query:
            return []
        return list(self.items)


class FailingProvider(SourceProvider):
    name = "failing"
    category = SourceCategory.DATABASE
    reliability = 0.5

    async def _search(self, query: str) -> List[EvidenceItem]:
        raise RuntimeError("backend exploded")


def make_item(title: str, url: str, category: SourceCategory = SourceCategory.ENCYCLOPEDIA,
              reliability: float = 0.82, snippet: str = "", **kwargs) -> EvidenceItem:
    return EvidenceItem(
        title=title,
        url=url,
        snippet=snippet,
        reliability=reliability,
        source_category=category,
        **kwargs,
    )


@pytest.fixture
def curie_providers():
    """An academic provider with one item and an encyclopedia provider with two, all about Marie Curie."""
    academic = FakeProvider(
        "pubmed", SourceCategory.ACADEMIC, 0.92,
        [make_item(
            "PubMed: Recherches scientifiques sur Marie",
            "https://pubmed.ncbi.nlm.nih.gov/?term=Marie%20Curie",
            SourceCategory.ACADEMIC, 0.92,
            snippet="Marie Curie a découvert le radium en 1898.",
            is_official_data=True,
        )],
        trigger="Curie",
    )
    encyclopedia = FakeProvider(
        "wikipedia", SourceCategory.ENCYCLOPEDIA, 0.82,
        [
            make_item(
                "Wikipedia (FR): Marie Curie",
                "https://fr.wikipedia.org/wiki/Marie_Curie",
                snippet="Marie Curie découvert le polonium et le radium en 1898...",
                relevance_score=1.0,
            ),
            make_item(
                "Wikipedia (EN): Radium",
                "https://en.wikipedia.org/wiki/Radium",
                snippet="Radium was discovered by Marie Curie and Pierre Curie in 1898...",
                relevance_score=0.8,
            ),
        ],
        trigger="Curie",
    )
    return [academic, encyclopedia]


@pytest.fixture
def test_client():
    """TestClient over the FastAPI app with a fresh cache and no live providers."""
    from fastapi.testclient import TestClient

    import main
    from services import VerificationService
    from utils.cache import ResultCache

    main.app.state.cache = ResultCache()
    main.app.state.service = VerificationService(providers=[])
    return TestClient(main.app)


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient; set `mock_client.get` per test."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


def json_response(payload, status_code: int = 200):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = payload
    mock_response.raise_for_status = MagicMock()
    return mock_response


@pytest.fixture
def sample_wikipedia_search_response():
    return {
        "query": {
            "search": [
                {"title": "Marie Curie"},
                {"title": "Polonium"},
                {"title": "Pierre Curie"},
            ]
        }
    }


@pytest.fixture
def sample_wikidata_response():
    return {
        "search": [
            {"id": "Q7186", "label": "Marie Curie", "description": "physicienne et chimiste"},
            {"id": "Q1128", "label": "radium"},
        ]
    }


@pytest.fixture
def sample_archive_response():
    return {
        "response": {
            "docs": [
                {"identifier": "curie-1898", "title": "Recherches sur les substances radioactives",
                 "description": ["Thèse de Marie Curie", "1903"]},
                {"identifier": "no-description", "title": "Untitled scan"},
                {"identifier": "third", "title": "Third", "description": "Never reached"},
            ]
        }
    }
