from typing import List

from config.constants import SOURCE_RELIABILITY, SOURCE_TIMEOUTS
from models.evidence import EvidenceItem, SourceCategory
from utils.text import extract_best_keywords
from .base import SourceProvider

DUCKDUCKGO_API_URL = "https://api.duckduckgo.com/"
MIN_ABSTRACT_LENGTH = 50


class DuckDuckGoSource(SourceProvider):
    """Instant-answer lookup. Contributes at most one item, and only with a real abstract."""

    name = "duckduckgo"
    category = SourceCategory.SEARCH_ENGINE
    reliability = SOURCE_RELIABILITY.DUCKDUCKGO
    request_timeout = SOURCE_TIMEOUTS.DUCKDUCKGO

    async def _search(self, query: str) -> List[EvidenceItem]:
        keywords = extract_best_keywords(query)
        if not keywords:
            return []

        data = await self._get_json(DUCKDUCKGO_API_URL, params={
            "q": " ".join(keywords),
            "format": "json",
            "no_html": 1,
            "skip_disambig": 1,
        })
        if not isinstance(data, dict):
            raise self._malformed("response is not a JSON object")

        abstract = data.get("Abstract") or ""
        if len(abstract) <= MIN_ABSTRACT_LENGTH:
            return []

        return [EvidenceItem(
            title=f"DuckDuckGo: {data.get('Heading') or 'Résultat instantané'}",
            url=data.get("AbstractURL") or "https://duckduckgo.com/",
            snippet=abstract[:200] + "...",
            reliability=self.reliability,
            source_category=self.category,
        )]
