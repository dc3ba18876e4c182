from .confidence_scorer import ConfidenceScorer
from .claim_evaluator import ClaimEvaluator
from .content_analyzer import ContentAnalyzer
from .quality_scorer import QualityBonusScorer
from .source_scorer import SourceScorer

__all__ = [
    "ConfidenceScorer",
    "ClaimEvaluator",
    "ContentAnalyzer",
    "QualityBonusScorer",
    "SourceScorer",
]
