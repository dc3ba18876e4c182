import asyncio
from typing import Dict, List, Optional, Sequence

from config import logger
from confidence import ClaimEvaluator, ConfidenceScorer
from exceptions import ValidationException
from models.evidence import EvidenceItem
from models.verdicts import VerificationResult
from sources import SourceProvider, default_providers
from utils.text import clean_text, extract_intelligent_claims
from .orchestration import gather_evidence
from .ranking import deduplicate_and_rank_sources


class VerificationService:
    
    def __init__(
        self,
        providers: Optional[Sequence[SourceProvider]] = None,
        confidence_scorer: Optional[ConfidenceScorer] = None,
        claim_evaluator: Optional[ClaimEvaluator] = None,
    ):
        self.providers = list(providers) if providers is not None else default_providers()
        self.confidence_scorer = confidence_scorer or ConfidenceScorer()
        self.claim_evaluator = claim_evaluator or ClaimEvaluator()
        self.registry: Dict[str, SourceProvider] = {p.name: p for p in self.providers}
    
    async def fact_check(self, text: str) -> VerificationResult:
        """
        Run the full pipeline on a passage: claims, evidence fan-out, ranking, scoring.

        Provider failures only reduce the evidence; a passage without claims
        or sources still yields a (low-confidence) result.
        """
        start_time = asyncio.get_running_loop().time()

        cleaned_text = clean_text(text)
        claims = extract_intelligent_claims(cleaned_text)
        logger.info(f"Extracted {len(claims)} claims from {len(cleaned_text)} characters.")

        all_sources = await gather_evidence(claims, self.providers)
        ranked_sources = deduplicate_and_rank_sources(all_sources)

        report = self.confidence_scorer.compute_confidence(claims, ranked_sources, cleaned_text)
        verdicts = [self.claim_evaluator.evaluate(claim.text, ranked_sources) for claim in claims]

        duration = round(asyncio.get_running_loop().time() - start_time, 2)
        logger.info(
            f"Fact-check completed for '{cleaned_text[:50]}...' in {duration} seconds: "
            f"{len(ranked_sources)} sources, confidence {report.final_score}."
        )

        return VerificationResult(
            overall_confidence=report.final_score,
            sources=ranked_sources,
            claims=verdicts,
            scoring_details=report.details,
            content_analysis=report.content_analysis,
        )

    async def search_source(self, source_name: str, query: str) -> List[EvidenceItem]:
        """Query a single knowledge base by name."""
        provider = self.registry.get(source_name)
        if provider is None:
            raise ValidationException("source", f"unknown source '{source_name}'")
        return await provider.search(query)
