from .client import DEFAULT_TIMEOUT, DatabaseHTTPClient

__all__ = ["DEFAULT_TIMEOUT", "DatabaseHTTPClient"]
