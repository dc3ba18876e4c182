from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from models.evidence import SourceCategory


@dataclass(frozen=True)
class TextConfig:
    MAX_TEXT_LENGTH: int = 8000
    MAX_CLAIMS: int = 3
    MIN_CLAIM_LENGTH: int = 25
    MAX_KEYWORDS: int = 6
    MAX_CONTENT_WORDS: int = 4
    MIN_CONTENT_WORD_LENGTH: int = 3

@dataclass(frozen=True)
class RelevanceConfig:
    STRONG_MATCH_MIN_LENGTH: int = 4
    STRONG_MATCH_BONUS: float = 0.2
    CLAIM_RELEVANCE_THRESHOLD: float = 0.2
    ENCYCLOPEDIA_RELEVANCE_THRESHOLD: float = 0.3

@dataclass(frozen=True)
class RankingConfig:
    MAX_SOURCES: int = 10
    TITLE_KEY_LENGTH: int = 30
    DOMAIN_FALLBACK_LENGTH: int = 20
    OFFICIAL_DATA_WEIGHT: int = 100
    RELIABILITY_WEIGHT: int = 100
    RELEVANCE_WEIGHT: int = 50

@dataclass(frozen=True)
class ConfidenceConfig:
    # Overall score, in percentage points
    BASE_SCORE: int = 30
    MIN_SCORE: int = 20
    MAX_SCORE: int = 90
    QUANTITY_TIERS: Tuple[Tuple[int, int], ...] = ((6, 25), (4, 20), (3, 15), (2, 10), (1, 5))
    DIVERSITY_BONUS: int = 10
    DIVERSITY_MIN_CATEGORIES: int = 3
    DIVERSITY_CATEGORIES: Tuple[SourceCategory, ...] = (
        SourceCategory.ENCYCLOPEDIA,
        SourceCategory.DATABASE,
        SourceCategory.ACADEMIC,
        SourceCategory.ARCHIVE,
    )

    OPINION_PENALTY: int = 30
    SUBJECTIVE_PENALTY: int = 20
    COMPARATIVE_PENALTY: int = 15
    SPECULATIVE_PENALTY: int = 10
    NO_SOURCES_PENALTY: int = 25

    # Per-claim score, in percentage points
    CLAIM_BASE_SCORE: int = 30
    CLAIM_SOURCE_TIERS: Tuple[Tuple[int, int], ...] = ((4, 40), (3, 30), (2, 20), (1, 10))
    VERIFIED_THRESHOLD: int = 75
    PARTIALLY_VERIFIED_THRESHOLD: int = 55
    UNCERTAIN_THRESHOLD: int = 40

@dataclass(frozen=True)
class SourceReliability:
    WIKIPEDIA: float = 0.82
    WIKIDATA: float = 0.85
    DUCKDUCKGO: float = 0.75
    ARCHIVE: float = 0.78
    PUBMED: float = 0.92
    OPENLIBRARY: float = 0.80

@dataclass(frozen=True)
class SourceTimeouts:
    """Per-request timeouts (seconds) for the knowledge-base adapters."""
    WIKIPEDIA: float = 5.0
    WIKIPEDIA_BUDGET: float = 10.0
    WIKIDATA: float = 5.0
    DUCKDUCKGO: float = 5.0
    ARCHIVE: float = 8.0
    PUBMED: float = 8.0
    OPENLIBRARY: float = 8.0

SOURCE_CATEGORY_WEIGHTS: Mapping[SourceCategory, int] = MappingProxyType({
    SourceCategory.ENCYCLOPEDIA: 12,
    SourceCategory.DATABASE: 15,
    SourceCategory.SEARCH_ENGINE: 8,
    SourceCategory.ARCHIVE: 10,
    SourceCategory.ACADEMIC: 18,
    SourceCategory.REFERENCE: 8,
})

TEXT_CONFIG = TextConfig()
RELEVANCE_CONFIG = RelevanceConfig()
RANKING_CONFIG = RankingConfig()
CONFIDENCE_CONFIG = ConfidenceConfig()
SOURCE_RELIABILITY = SourceReliability()
SOURCE_TIMEOUTS = SourceTimeouts()
