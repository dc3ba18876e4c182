from typing import Any, Dict

from .base import FactCheckModel


class HealthResponse(FactCheckModel):
    status: str
    timestamp: int


class StatsResponse(FactCheckModel):
    cache_size: int
    uptime: float
    memory: Dict[str, int]
    requests: Dict[str, int] = {}
    timestamp: int


class ErrorResponse(FactCheckModel):
    error: str
    message: str
    details: Dict[str, Any] = {}
