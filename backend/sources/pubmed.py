import re
from typing import List
from urllib.parse import quote

from config.constants import SOURCE_RELIABILITY, SOURCE_TIMEOUTS
from models.evidence import EvidenceItem, SourceCategory
from .base import SourceProvider

PUBMED_SEARCH_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/esearch.fcgi"

SCIENTIFIC_TERMS_PATTERN = re.compile(
    r"\b(maladie|virus|traitement|médical|recherche|étude|scientifique|découverte"
    r"|cancer|vaccin|radioactivité|curie|becquerel)\b",
    re.IGNORECASE,
)


def has_scientific_terms(query: str) -> bool:
    return bool(SCIENTIFIC_TERMS_PATTERN.search(query))


class PubMedSource(SourceProvider):
    """
    Academic literature search (NCBI E-utilities).

    Only queried for scientific/medical claims; any other query returns an
    empty result without a network call. A hit yields one aggregate item
    pointing to the PubMed result page.
    """

    name = "pubmed"
    category = SourceCategory.ACADEMIC
    reliability = SOURCE_RELIABILITY.PUBMED
    request_timeout = SOURCE_TIMEOUTS.PUBMED

    async def _search(self, query: str) -> List[EvidenceItem]:
        if not has_scientific_terms(query):
            return []

        data = await self._get_json(PUBMED_SEARCH_URL, params={
            "db": "pubmed",
            "term": query,
            "retmode": "json",
            "retmax": 3,
        })
        if not isinstance(data, dict):
            raise self._malformed("response is not a JSON object")

        result = data.get("esearchresult") or {}
        if not result.get("idlist"):
            return []

        return [EvidenceItem(
            title=f"PubMed: Recherches scientifiques sur {query.split(' ')[0]}",
            url=f"https://pubmed.ncbi.nlm.nih.gov/?term={quote(query)}",
            snippet=(
                f"Base de données de {result.get('count', len(result['idlist']))} publications "
                "scientifiques médicales - Source officielle NCBI/NIH."
            ),
            reliability=self.reliability,
            source_category=self.category,
            is_official_data=True,
        )]
