from config.constants import CONFIDENCE_CONFIG
from models.confidence import SourceBreakdown

class QualityBonusScorer:
    """Bonus for evidence quantity, plus a bonus for category diversity."""
    
    def __init__(self, config=CONFIDENCE_CONFIG):
        self.config = config
    
    def score(self, breakdown: SourceBreakdown) -> int:
        bonus = next(
            (points for minimum, points in self.config.QUANTITY_TIERS if breakdown.total >= minimum),
            0,
        )

        represented = [
            category for category in self.config.DIVERSITY_CATEGORIES
            if getattr(breakdown, category.value) > 0
        ]
        if len(represented) >= self.config.DIVERSITY_MIN_CATEGORIES:
            bonus += self.config.DIVERSITY_BONUS

        return bonus
