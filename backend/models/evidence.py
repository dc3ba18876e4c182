from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from .base import FactCheckModel


class SourceCategory(str, Enum):
    ENCYCLOPEDIA = "encyclopedia"
    DATABASE = "database"
    SEARCH_ENGINE = "search_engine"
    ARCHIVE = "archive"
    ACADEMIC = "academic"
    REFERENCE = "reference"


class EvidenceItem(FactCheckModel):
    """A titled, URL-addressed snippet returned by one knowledge base."""
    title: str
    url: str
    snippet: str
    reliability: float = Field(..., ge=0.0, le=1.0)
    source_category: SourceCategory
    relevance_score: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    is_official_data: bool = False
    is_structured_data: bool = False

    @field_validator("title", "url", "snippet", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    def with_relevance(self, score: float) -> "EvidenceItem":
        return self.model_copy(update={"relevance_score": score})


# Deduplicated, capped and sorted by composite score; built once per request.
RankedEvidenceSet = List[EvidenceItem]
