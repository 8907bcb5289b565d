from typing import Optional, Dict, Any


class NewsHarvesterError(Exception):
    """Base exception for the harvester. Carries a context dict for logging."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class FetchError(NewsHarvesterError):
    """Network error, timeout or non-2xx response after the retry was spent."""

    def __init__(self, url: str, status_code: Optional[int] = None, original_error: Optional[Exception] = None):
        if status_code is not None:
            message = f"Failed to fetch {url} (status {status_code})"
        else:
            message = f"Failed to fetch {url}: {original_error}"
        super().__init__(message, context={
            "url": url,
            "status_code": status_code,
            "original_error": str(original_error) if original_error else None,
        })
        self.url = url
        self.status_code = status_code
        self.original_error = original_error


class ParseError(NewsHarvesterError):
    """Input handed to the markup parser was not text at all."""
    pass
