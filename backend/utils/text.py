"""Text normalization, claim splitting and keyword extraction."""
import re
from typing import List

from config.constants import TEXT_CONFIG
from models.claims import Claim

_UPPER = "A-ZÀÂÄÉÈÊËÏÎÔÖÙÛÜŸÇ"
_LOWER = "a-zàâäéèêëïîôöùûüÿç"

PROPER_NOUN_PATTERN = re.compile(rf"\b[{_UPPER}][{_LOWER}]+(?:\s+[{_UPPER}][{_LOWER}]+)*\b")
YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")
NUMBER_PATTERN = re.compile(r"\b\d+(?:[.,]\d+)?\b")
NON_WORD_PATTERN = re.compile(r"[^\w\s]")
WHITESPACE_PATTERN = re.compile(r"\s+")
SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")

STOP_WORDS = frozenset({
    # French
    "le", "la", "les", "un", "une", "des", "et", "ou", "de", "du", "dans", "sur",
    "avec", "par", "pour", "sans", "qui", "que", "est", "sont", "été", "avoir", "être",
    # English
    "the", "and", "or", "in", "on", "at", "to", "for", "of", "with", "that", "this",
    "was", "were", "has", "have", "had",
})


def clean_text(text: str) -> str:
    """Trim, collapse whitespace runs and truncate to the maximum analysed length."""
    if not isinstance(text, str):
        raise TypeError(f"Text must be a string, got {type(text).__name__}")
    return WHITESPACE_PATTERN.sub(" ", text.strip())[:TEXT_CONFIG.MAX_TEXT_LENGTH]


def extract_intelligent_claims(text: str) -> List[Claim]:
    fragments = (s.strip() for s in SENTENCE_SPLIT_PATTERN.split(text))
    claims = [Claim(text=s) for s in fragments if len(s) > TEXT_CONFIG.MIN_CLAIM_LENGTH]
    return claims[:TEXT_CONFIG.MAX_CLAIMS]


def extract_best_keywords(text: str) -> List[str]:
    """
    Build search keywords from a text span.
    Priority order: proper-noun sequences, years, numbers, then a few
    significant lowercase words. Only the first MAX_KEYWORDS survive.
    """
    proper_nouns = PROPER_NOUN_PATTERN.findall(text)
    years = YEAR_PATTERN.findall(text)
    numbers = NUMBER_PATTERN.findall(text)

    words = [
        word for word in NON_WORD_PATTERN.sub(" ", text.lower()).split()
        if len(word) > TEXT_CONFIG.MIN_CONTENT_WORD_LENGTH and word not in STOP_WORDS
    ][:TEXT_CONFIG.MAX_CONTENT_WORDS]

    return (proper_nouns + years + numbers + words)[:TEXT_CONFIG.MAX_KEYWORDS]
