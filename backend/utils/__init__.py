from .text import clean_text, extract_intelligent_claims, extract_best_keywords
from .relevance import calculate_relevance
from .cache import ResultCache, run_periodic_sweep

__all__ = [
    "clean_text",
    "extract_intelligent_claims",
    "extract_best_keywords",
    "calculate_relevance",
    "ResultCache",
    "run_periodic_sweep",
]
