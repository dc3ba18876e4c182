import asyncio
from typing import List, Sequence

from config import logger
from models.claims import Claim
from models.evidence import EvidenceItem
from sources.base import SourceProvider


async def gather_evidence(
    claims: Sequence[Claim],
    providers: Sequence[SourceProvider]
) -> List[EvidenceItem]:
    """
    Query every provider for every claim concurrently and merge the results.
    Args:
        claims: Claims extracted from the input text
        providers: Knowledge bases to query
    Returns:
        Flat list of evidence items, in dispatch order
    """
    tasks = [
        provider.search(claim.text)
        for claim in claims
        for provider in providers
    ]

    if not tasks:
        logger.warning("No source queries generated (no claims or no providers).")
        return []

    logger.info(f"Dispatching {len(tasks)} source queries for {len(claims)} claims.")
    results = await asyncio.gather(*tasks, return_exceptions=True)

    evidence: List[EvidenceItem] = []
    for i, res in enumerate(results):
        if isinstance(res, BaseException):
            logger.error(f"Error during source query task index {i}: {res}", exc_info=res)
        elif isinstance(res, list):
            evidence.extend(item for item in res if item is not None)
        elif res is not None:
            logger.warning(f"Unexpected result type from task index {i}: {type(res)}")

    logger.info(f"Collected {len(evidence)} evidence items.")
    return evidence
