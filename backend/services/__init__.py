from .orchestration import gather_evidence
from .ranking import composite_score, deduplicate_and_rank_sources, extract_domain
from .verification_service import VerificationService

__all__ = [
    "gather_evidence",
    "composite_score",
    "deduplicate_and_rank_sources",
    "extract_domain",
    "VerificationService",
]
