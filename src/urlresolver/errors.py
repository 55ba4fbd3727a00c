"""
Error types for the URL resolution system.

Collaborator failures (I/O, parsing, validation) are never raised to callers
directly. They are wrapped into one of the two kinds below, with the original
exception kept as the cause.
"""
from typing import Any, Optional


class UrlResolverError(Exception):
    """Base class for URL resolver errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        """
        Initialize the error.

        Args:
            message: Human-readable description of the failure
            cause: Original exception, if any
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class ConstructionError(UrlResolverError):
    """Raised when a URL resolver instance cannot be built."""


class ResolutionError(UrlResolverError):
    """Raised when a URL resolver cannot produce URLs for a request."""

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 index: Any = None, url_file: Optional[str] = None):
        super().__init__(message, cause)
        self.index = index
        self.url_file = url_file


# Collaborator failures wrapped into ConstructionError when a resolver is built
CONSTRUCTION_FAILURES = (KeyError, ValueError, TypeError, AttributeError, OSError)
