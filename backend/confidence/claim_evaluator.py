from typing import Sequence

from config.constants import CONFIDENCE_CONFIG, RELEVANCE_CONFIG
from models.claims import ClaimStatus, ClaimVerdict
from models.evidence import EvidenceItem
from utils.relevance import calculate_relevance


class ClaimEvaluator:
    """
    Scores one claim against the globally ranked sources.

    Relevance is recomputed per claim: a source ranked high for the whole
    passage may say nothing about this particular claim.
    """

    def __init__(self, config=CONFIDENCE_CONFIG, relevance_threshold: float = None):
        self.config = config
        self.relevance_threshold = (
            RELEVANCE_CONFIG.CLAIM_RELEVANCE_THRESHOLD if relevance_threshold is None else relevance_threshold
        )

    def count_relevant_sources(self, claim_text: str, sources: Sequence[EvidenceItem]) -> int:
        return sum(
            1 for s in sources
            if calculate_relevance(claim_text, f"{s.title} {s.snippet}") > self.relevance_threshold
        )

    def get_status(self, points: int) -> ClaimStatus:
        if points >= self.config.VERIFIED_THRESHOLD:
            return ClaimStatus.VERIFIED
        elif points >= self.config.PARTIALLY_VERIFIED_THRESHOLD:
            return ClaimStatus.PARTIALLY_VERIFIED
        elif points >= self.config.UNCERTAIN_THRESHOLD:
            return ClaimStatus.UNCERTAIN
        else:
            return ClaimStatus.DISPUTED

    def evaluate(self, claim_text: str, sources: Sequence[EvidenceItem]) -> ClaimVerdict:
        relevant = self.count_relevant_sources(claim_text, sources)

        points = self.config.CLAIM_BASE_SCORE + next(
            (bonus for minimum, bonus in self.config.CLAIM_SOURCE_TIERS if relevant >= minimum),
            0,
        )
        clamped = max(self.config.MIN_SCORE, min(self.config.MAX_SCORE, points))

        return ClaimVerdict(
            text=claim_text,
            confidence=clamped / 100,
            status=self.get_status(points),
            relevant_sources=relevant,
        )
