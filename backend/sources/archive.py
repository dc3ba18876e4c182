from typing import Any, List

from config.constants import SOURCE_RELIABILITY, SOURCE_TIMEOUTS
from models.evidence import EvidenceItem, SourceCategory
from .base import SourceProvider

ARCHIVE_SEARCH_URL = "https://archive.org/advancedsearch.php"


def _as_text(value: Any) -> str:
    # archive.org returns either a string or a list of strings for text fields
    if isinstance(value, list):
        return " ".join(str(v) for v in value if v)
    return str(value) if value else ""


class ArchiveOrgSource(SourceProvider):
    name = "archive"
    category = SourceCategory.ARCHIVE
    reliability = SOURCE_RELIABILITY.ARCHIVE
    request_timeout = SOURCE_TIMEOUTS.ARCHIVE

    async def _search(self, query: str) -> List[EvidenceItem]:
        data = await self._get_json(ARCHIVE_SEARCH_URL, params={
            "q": query,
            "fl[]": ["identifier", "title", "description"],
            "rows": 3,
            "output": "json",
        })
        if not isinstance(data, dict):
            raise self._malformed("response is not a JSON object")

        docs = (data.get("response") or {}).get("docs") or []
        results = []
        for doc in docs[:2]:
            title = _as_text(doc.get("title"))
            description = _as_text(doc.get("description"))
            if not (title and description and doc.get("identifier")):
                continue
            results.append(EvidenceItem(
                title=f"Archive.org: {title[:60]}...",
                url=f"https://archive.org/details/{doc['identifier']}",
                snippet=description[:180] + "...",
                reliability=self.reliability,
                source_category=self.category,
            ))
        return results
