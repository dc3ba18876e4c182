from .context import RequestContextMiddleware, get_request_id, request_counts

__all__ = ["RequestContextMiddleware", "get_request_id", "request_counts"]
