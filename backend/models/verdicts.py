from typing import List

from .base import FactCheckModel
from .claims import ClaimVerdict
from .confidence import ContentAnalysis, ScoringDetails
from .evidence import EvidenceItem


class VerificationResult(FactCheckModel):
    """Complete response of one fact-check run."""
    overall_confidence: float
    sources: List[EvidenceItem]
    claims: List[ClaimVerdict]
    scoring_details: ScoringDetails
    content_analysis: ContentAnalysis
