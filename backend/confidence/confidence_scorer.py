from typing import Sequence

from config import logger
from config.constants import CONFIDENCE_CONFIG
from models.claims import Claim
from models.confidence import ConfidenceReport, ContentAnalysis, ScoringDetails
from models.evidence import EvidenceItem
from .content_analyzer import ContentAnalyzer
from .quality_scorer import QualityBonusScorer
from .source_scorer import SourceScorer


class ConfidenceScorer:
    def __init__(
        self,
        source_scorer: SourceScorer = None,
        quality_scorer: QualityBonusScorer = None,
        content_analyzer: ContentAnalyzer = None
    ):
        self.source_scorer = source_scorer or SourceScorer()
        self.quality_scorer = quality_scorer or QualityBonusScorer()
        self.content_analyzer = content_analyzer or ContentAnalyzer()
        self.config = CONFIDENCE_CONFIG
    
    def compute_penalties(self, analysis: ContentAnalysis, total_sources: int) -> int:
        penalties = 0
        if analysis.is_opinion:
            penalties += self.config.OPINION_PENALTY
        if analysis.is_subjective:
            penalties += self.config.SUBJECTIVE_PENALTY
        if analysis.is_comparative:
            penalties += self.config.COMPARATIVE_PENALTY
        if analysis.is_speculative:
            penalties += self.config.SPECULATIVE_PENALTY
        if total_sources == 0:
            penalties += self.config.NO_SOURCES_PENALTY
        return penalties

    def compute_confidence(
        self,
        claims: Sequence[Claim],
        sources: Sequence[EvidenceItem],
        text: str
    ) -> ConfidenceReport:
        analysis = self.content_analyzer.analyze(text)

        source_score, breakdown = self.source_scorer.score(sources)
        quality_bonus = self.quality_scorer.score(breakdown)
        penalties = self.compute_penalties(analysis, breakdown.total)

        raw_score = self.config.BASE_SCORE + source_score + quality_bonus - penalties
        final_percentage = max(self.config.MIN_SCORE, min(self.config.MAX_SCORE, raw_score))

        details = ScoringDetails(
            base_score=self.config.BASE_SCORE,
            source_score=source_score,
            quality_bonus=quality_bonus,
            penalties=penalties,
            raw_score=raw_score,
            final_percentage=final_percentage,
            source_breakdown=breakdown,
        )

        logger.info(
            f"Confidence calculation: {len(claims)} claims, {breakdown.total} sources, "
            f"base={self.config.BASE_SCORE} sources={source_score} bonus={quality_bonus} "
            f"penalties={penalties} ({analysis.content_type.value}) → {final_percentage}%"
        )

        return ConfidenceReport(
            final_score=final_percentage / 100,
            details=details,
            content_analysis=analysis,
        )
