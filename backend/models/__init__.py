from .base import FactCheckModel
from .evidence import EvidenceItem, RankedEvidenceSet, SourceCategory
from .claims import Claim, ClaimStatus, ClaimVerdict, VerifyRequest
from .confidence import (
    ConfidenceReport,
    ContentAnalysis,
    ContentType,
    ScoringDetails,
    SourceBreakdown,
)
from .verdicts import VerificationResult
from .api_responses import (
    ErrorResponse,
    HealthResponse,
    StatsResponse,
)

__all__ = [
    "FactCheckModel",

    "EvidenceItem",
    "RankedEvidenceSet",
    "SourceCategory",

    "Claim",
    "ClaimStatus",
    "ClaimVerdict",
    "VerifyRequest",

    "ConfidenceReport",
    "ContentAnalysis",
    "ContentType",
    "ScoringDetails",
    "SourceBreakdown",

    "VerificationResult",

    "ErrorResponse",
    "HealthResponse",
    "StatsResponse",
]
