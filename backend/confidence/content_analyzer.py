import re
from typing import Sequence

from models.confidence import ContentAnalysis, ContentType


def _compile(*patterns: str) -> Sequence[re.Pattern]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


OPINION_PATTERNS = _compile(
    r"\b(meilleur|meilleure|pire|plus beau|plus belle|plus grand|plus petit)\b.*\b(monde|univers|planète|terre)\b",
    r"\b(plus.*ville|plus.*pays|plus.*endroit)\b.*\b(monde|univers|planète)\b",
    r"\b(préfère|aime mieux|déteste|adore|magnifique|horrible|parfait|nul|génial|fantastique)\b",
    r"\b(opinion|goût|point de vue|je pense|à mon avis|selon moi)\b",
)

SUBJECTIVE_PATTERNS = _compile(
    r"\b(beau|belle|laid|joli|superbe|merveilleux|extraordinaire|incroyable|impressionnant|remarquable|exceptionnel)\b",
)

COMPARATIVE_PATTERNS = _compile(
    r"\b(plus.*que|moins.*que|meilleur.*que|pire.*que|supérieur|inférieur|comparé|versus|vs)\b",
)

SPECULATIVE_PATTERNS = _compile(
    r"\b(peut-être|probablement|semble|paraît|suppose|présume|vraisemblablement|apparemment|sans doute)\b",
)


def _matches_any(patterns: Sequence[re.Pattern], text: str) -> bool:
    return any(p.search(text) for p in patterns)


class ContentAnalyzer:
    """Detects opinion, subjective, comparative and speculative wording in a text."""

    def __init__(
        self,
        opinion_patterns: Sequence[re.Pattern] = OPINION_PATTERNS,
        subjective_patterns: Sequence[re.Pattern] = SUBJECTIVE_PATTERNS,
        comparative_patterns: Sequence[re.Pattern] = COMPARATIVE_PATTERNS,
        speculative_patterns: Sequence[re.Pattern] = SPECULATIVE_PATTERNS,
    ):
        self.opinion_patterns = opinion_patterns
        self.subjective_patterns = subjective_patterns
        self.comparative_patterns = comparative_patterns
        self.speculative_patterns = speculative_patterns

    def is_opinion(self, text: str) -> bool:
        return _matches_any(self.opinion_patterns, text)

    def is_subjective(self, text: str) -> bool:
        return _matches_any(self.subjective_patterns, text)

    def is_comparative(self, text: str) -> bool:
        return _matches_any(self.comparative_patterns, text)

    def is_speculative(self, text: str) -> bool:
        return _matches_any(self.speculative_patterns, text)

    def analyze(self, text: str) -> ContentAnalysis:
        is_opinion = self.is_opinion(text)
        is_subjective = self.is_subjective(text)

        if is_opinion:
            content_type = ContentType.OPINION
        elif is_subjective:
            content_type = ContentType.SUBJECTIVE
        else:
            content_type = ContentType.FACTUAL

        return ContentAnalysis(
            is_opinion=is_opinion,
            is_subjective=is_subjective,
            is_comparative=self.is_comparative(text),
            is_speculative=self.is_speculative(text),
            content_type=content_type,
        )
