from enum import Enum

from pydantic import Field

from .base import FactCheckModel


class ContentType(str, Enum):
    OPINION = "OPINION"
    SUBJECTIVE = "SUBJECTIF"
    FACTUAL = "FACTUEL"


class ContentAnalysis(FactCheckModel):
    is_opinion: bool
    is_subjective: bool
    is_comparative: bool
    is_speculative: bool
    content_type: ContentType


class SourceBreakdown(FactCheckModel):
    encyclopedia: int = 0
    database: int = 0
    academic: int = 0
    archive: int = 0
    search_engine: int = 0
    reference: int = 0
    total: int = 0


class ScoringDetails(FactCheckModel):
    base_score: int
    source_score: int
    quality_bonus: int
    penalties: int
    raw_score: int
    final_percentage: int
    source_breakdown: SourceBreakdown


class ConfidenceReport(FactCheckModel):
    final_score: float = Field(..., ge=0.20, le=0.90)
    details: ScoringDetails
    content_analysis: ContentAnalysis
