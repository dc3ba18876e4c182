import re
from typing import List

from config.constants import SOURCE_RELIABILITY, SOURCE_TIMEOUTS
from models.evidence import EvidenceItem, SourceCategory
from .base import SourceProvider

OPENLIBRARY_SEARCH_URL = "https://openlibrary.org/search.json"

BOOK_TERMS_PATTERN = re.compile(
    r"\b(livre|auteur|écrivain|roman|poésie|littérature|publié|édition"
    r"|shakespeare|hugo|voltaire)\b",
    re.IGNORECASE,
)


def has_book_terms(query: str) -> bool:
    return bool(BOOK_TERMS_PATTERN.search(query))


class OpenLibrarySource(SourceProvider):
    """Books catalog search, only queried for claims about literature."""

    name = "openlibrary"
    category = SourceCategory.REFERENCE
    reliability = SOURCE_RELIABILITY.OPENLIBRARY
    request_timeout = SOURCE_TIMEOUTS.OPENLIBRARY

    async def _search(self, query: str) -> List[EvidenceItem]:
        if not has_book_terms(query):
            return []

        data = await self._get_json(OPENLIBRARY_SEARCH_URL, params={"q": query, "limit": 3})
        if not isinstance(data, dict):
            raise self._malformed("response is not a JSON object")

        results = []
        for book in (data.get("docs") or [])[:2]:
            title = book.get("title")
            authors = book.get("author_name") or []
            if not (title and authors and book.get("key")):
                continue
            year = book.get("first_publish_year")
            published = f"publié en {year}" if year else ""
            results.append(EvidenceItem(
                title=f"OpenLibrary: {title[:50]}...",
                url=f"https://openlibrary.org{book['key']}",
                snippet=f"Livre de {authors[0]} {published} - Archive numérique.",
                reliability=self.reliability,
                source_category=self.category,
            ))
        return results
