from typing import List

from .base import SourceProvider
from .wikipedia import WikipediaSource
from .wikidata import WikidataSource
from .duckduckgo import DuckDuckGoSource
from .archive import ArchiveOrgSource
from .pubmed import PubMedSource
from .openlibrary import OpenLibrarySource


def default_providers() -> List[SourceProvider]:
    """The six knowledge bases queried for every claim, in dispatch order."""
    return [
        WikipediaSource(),
        WikidataSource(),
        DuckDuckGoSource(),
        ArchiveOrgSource(),
        PubMedSource(),
        OpenLibrarySource(),
    ]


__all__ = [
    "SourceProvider",
    "WikipediaSource",
    "WikidataSource",
    "DuckDuckGoSource",
    "ArchiveOrgSource",
    "PubMedSource",
    "OpenLibrarySource",
    "default_providers",
]
