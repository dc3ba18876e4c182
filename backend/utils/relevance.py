from config.constants import RELEVANCE_CONFIG
from .text import extract_best_keywords

def calculate_relevance(claim: str, source_text: str) -> float:
    """Lexical keyword-overlap score in [0, 1] between a claim and a source text."""
    keywords = extract_best_keywords(claim)
    haystack = (source_text or "").lower()

    matches = [kw for kw in keywords if kw.lower() in haystack]
    relevance = len(matches) / max(len(keywords), 1)

    if any(len(kw) > RELEVANCE_CONFIG.STRONG_MATCH_MIN_LENGTH for kw in matches):
        relevance += RELEVANCE_CONFIG.STRONG_MATCH_BONUS

    return min(relevance, 1.0)
