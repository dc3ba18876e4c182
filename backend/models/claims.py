from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field

from .base import FactCheckModel


class Claim(FactCheckModel):
    text: str


class ClaimStatus(str, Enum):
    VERIFIED = "verified"
    PARTIALLY_VERIFIED = "partially_verified"
    UNCERTAIN = "uncertain"
    DISPUTED = "disputed"


class ClaimVerdict(FactCheckModel):
    text: str
    confidence: float = Field(..., ge=0.20, le=0.90)
    status: ClaimStatus
    relevant_sources: int = Field(..., ge=0)


class VerifyRequest(FactCheckModel):
    """Request body for the /verify endpoint. Length is checked by InputValidator."""
    text: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "Marie Curie a découvert le radium en 1898 avec Pierre Curie."
            }
        }
    )
