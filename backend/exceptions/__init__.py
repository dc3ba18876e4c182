from typing import Any, Dict, Optional


class FactCheckException(Exception):
    """Base error of the fact-checking service; `status_code` is used when it reaches the API."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(FactCheckException):
    """Rejected request input. The pipeline never runs for such a request."""

    status_code = 400

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(
            f"Validation failed for {field}: {reason}",
            {"field": field, "reason": reason},
        )


class DataSourceException(FactCheckException):
    """
    A knowledge base answered with something unusable.

    Raised inside adapters only; `SourceProvider.search` logs it and degrades
    to an empty result, so it never reaches a client.
    """

    status_code = 502

    def __init__(self, source: str, reason: str, recoverable: bool = True):
        self.source = source
        self.recoverable = recoverable
        super().__init__(
            f"Data source {source} returned an unusable response: {reason}",
            {"source": source, "reason": reason, "recoverable": recoverable},
        )
