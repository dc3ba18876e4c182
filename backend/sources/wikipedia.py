import asyncio
from typing import List, Optional, Sequence
from urllib.parse import quote

from config import logger, settings
from config.constants import RELEVANCE_CONFIG, SOURCE_RELIABILITY, SOURCE_TIMEOUTS
from models.evidence import EvidenceItem, SourceCategory
from utils.relevance import calculate_relevance
from utils.text import extract_best_keywords
from .base import SourceProvider

MAX_ARTICLES_PER_LANGUAGE = 2
MIN_EXTRACT_LENGTH = 50
SNIPPET_LENGTH = 200


class WikipediaSource(SourceProvider):
    """Multi-language encyclopedia lookup; keeps only articles relevant to the claim."""

    name = "wikipedia"
    category = SourceCategory.ENCYCLOPEDIA
    reliability = SOURCE_RELIABILITY.WIKIPEDIA
    request_timeout = SOURCE_TIMEOUTS.WIKIPEDIA
    language_timeout = SOURCE_TIMEOUTS.WIKIPEDIA_BUDGET

    def __init__(self, languages: Optional[Sequence[str]] = None):
        self.languages = list(languages or settings.WIKIPEDIA_LANGUAGES)

    @property
    def search_budget(self) -> Optional[float]:
        return None

    async def _search(self, query: str) -> List[EvidenceItem]:
        keywords = extract_best_keywords(query)
        if not keywords:
            return []

        per_language = await asyncio.gather(
            *(self._search_language(lang, " ".join(keywords), query) for lang in self.languages)
        )
        return [item for items in per_language for item in items]

    async def _search_language(self, lang: str, keyword_query: str, claim: str) -> List[EvidenceItem]:
        # Each language has its own budget, so a slow or failing one never hides the others.
        try:
            return await asyncio.wait_for(
                self._query_language(lang, keyword_query, claim), timeout=self.language_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"Wikipedia ({lang}) search timed out after {self.language_timeout}s")
        except Exception as e:
            logger.warning(f"Wikipedia ({lang}) search failed: {e}")
        return []

    async def _query_language(self, lang: str, keyword_query: str, claim: str) -> List[EvidenceItem]:
        data = await self._get_json(
            f"https://{lang}.wikipedia.org/w/api.php",
            params={
                "action": "query",
                "list": "search",
                "srsearch": keyword_query,
                "format": "json",
                "origin": "*",
                "srlimit": 3,
            },
        )
        if not isinstance(data, dict):
            raise self._malformed(f"{lang} search response is not a JSON object")

        hits = (data.get("query") or {}).get("search") or []
        titles = [hit.get("title") for hit in hits[:MAX_ARTICLES_PER_LANGUAGE] if hit.get("title")]

        articles = await asyncio.gather(*(self._fetch_article(lang, title, claim) for title in titles))
        return [article for article in articles if article is not None]

    async def _fetch_article(self, lang: str, title: str, claim: str) -> Optional[EvidenceItem]:
        try:
            data = await self._get_json(
                f"https://{lang}.wikipedia.org/api/rest_v1/page/summary/{quote(title, safe='')}"
            )
        except Exception as e:
            logger.warning(f"Fetch Wikipedia content failed for '{title}': {e}")
            return None

        if not isinstance(data, dict):
            return None

        extract = data.get("extract") or ""
        if len(extract) <= MIN_EXTRACT_LENGTH:
            return None

        page_title = data.get("title") or title
        relevance = calculate_relevance(claim, f"{page_title} {extract}")
        if relevance <= RELEVANCE_CONFIG.ENCYCLOPEDIA_RELEVANCE_THRESHOLD:
            return None

        page_url = (((data.get("content_urls") or {}).get("desktop") or {}).get("page")
                    or f"https://{lang}.wikipedia.org/wiki/{quote(page_title.replace(' ', '_'))}")

        return EvidenceItem(
            title=f"Wikipedia ({lang.upper()}): {page_title}",
            url=page_url,
            snippet=extract[:SNIPPET_LENGTH] + "...",
            reliability=self.reliability,
            source_category=self.category,
        ).with_relevance(relevance)
