from typing import Iterable, List
from urllib.parse import urlparse

from config.constants import RANKING_CONFIG
from models.evidence import EvidenceItem, RankedEvidenceSet


def extract_domain(url: str) -> str:
    """Hostname without a leading 'www.'; falls back to a raw prefix for unparsable URLs."""
    try:
        parsed = urlparse(url or "")
        hostname = parsed.hostname if parsed.scheme else None
    except ValueError:
        hostname = None

    if not hostname:
        return url[:RANKING_CONFIG.DOMAIN_FALLBACK_LENGTH] if url else ""

    return hostname[4:] if hostname.startswith("www.") else hostname


def composite_score(item: EvidenceItem) -> float:
    return (
        RANKING_CONFIG.OFFICIAL_DATA_WEIGHT * (1 if item.is_official_data else 0)
        + RANKING_CONFIG.RELIABILITY_WEIGHT * item.reliability
        + RANKING_CONFIG.RELEVANCE_WEIGHT * (item.relevance_score or 0)
    )


def dedup_key(item: EvidenceItem) -> str:
    return f"{extract_domain(item.url)}-{item.title[:RANKING_CONFIG.TITLE_KEY_LENGTH]}"


def deduplicate_and_rank_sources(items: Iterable[EvidenceItem]) -> RankedEvidenceSet:
    """
    Keep the first item per (domain, title prefix) key, at most MAX_SOURCES of them,
    then sort by composite score. The sort is stable, so ties keep insertion order.
    """
    seen = set()
    kept: List[EvidenceItem] = []

    for item in items:
        if len(kept) >= RANKING_CONFIG.MAX_SOURCES:
            break
        key = dedup_key(item)
        if key in seen:
            continue
        seen.add(key)
        kept.append(item)

    return sorted(kept, key=composite_score, reverse=True)
