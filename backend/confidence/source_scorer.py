from collections import Counter
from typing import Mapping, Sequence, Tuple

from config.constants import SOURCE_CATEGORY_WEIGHTS
from models.confidence import SourceBreakdown
from models.evidence import EvidenceItem, SourceCategory


class SourceScorer:
    """Weighted source score: each source adds the weight of its category."""
    
    def __init__(self, weights: Mapping[SourceCategory, int] = None):
        self.weights = weights or SOURCE_CATEGORY_WEIGHTS
    
    def score(self, sources: Sequence[EvidenceItem]) -> Tuple[int, SourceBreakdown]:
        """
        Args:
            sources: Final ranked sources
        Returns:
            (source score in percentage points, per-category counts)
        """
        counts = Counter(source.source_category for source in sources)
        source_score = sum(self.weights.get(category, 0) * n for category, n in counts.items())

        breakdown = SourceBreakdown(
            **{category.value: counts.get(category, 0) for category in SourceCategory},
            total=len(sources),
        )
        return source_score, breakdown
