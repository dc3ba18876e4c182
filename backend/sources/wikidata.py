from typing import List

from config.constants import SOURCE_RELIABILITY, SOURCE_TIMEOUTS
from models.evidence import EvidenceItem, SourceCategory
from utils.text import extract_best_keywords
from .base import SourceProvider

WIKIDATA_API_URL = "https://www.wikidata.org/w/api.php"
DEFAULT_DESCRIPTION = "Entité Wikidata structurée"


class WikidataSource(SourceProvider):
    name = "wikidata"
    category = SourceCategory.DATABASE
    reliability = SOURCE_RELIABILITY.WIKIDATA
    request_timeout = SOURCE_TIMEOUTS.WIKIDATA

    async def _search(self, query: str) -> List[EvidenceItem]:
        keywords = extract_best_keywords(query)
        if not keywords:
            return []

        data = await self._get_json(WIKIDATA_API_URL, params={
            "action": "wbsearchentities",
            "search": " ".join(keywords),
            "language": "fr",
            "format": "json",
            "origin": "*",
            "limit": 3,
        })
        if not isinstance(data, dict):
            raise self._malformed("response is not a JSON object")

        results = []
        for entity in data.get("search") or []:
            entity_id = entity.get("id")
            if not entity_id:
                continue
            description = entity.get("description") or DEFAULT_DESCRIPTION
            results.append(EvidenceItem(
                title=f"Wikidata: {entity.get('label') or entity_id}",
                url=f"https://www.wikidata.org/wiki/{entity_id}",
                snippet=f"{description} - Données factuelles vérifiables.",
                reliability=self.reliability,
                source_category=self.category,
                is_structured_data=True,
            ))
        return results
