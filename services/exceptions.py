"""
Custom exceptions for email reply generation.

Transport failures propagate to the route handler, which reports them
as HTTP 400. Response-shape failures are only raised in strict mode.
"""

from typing import Optional


class EmailGenerationError(Exception):
    """
    Base exception for email generation failures.

    All generation-specific exceptions inherit from this.
    """
    pass


class ProviderTransportError(EmailGenerationError):
    """
    Raised when the call to the Gemini API cannot complete.

    Attributes:
        status_code: HTTP status returned by the provider, if any

    The message never contains the request URL since the API key is part of it.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ProviderTimeoutError(ProviderTransportError):
    """Raised when the Gemini API does not answer within the configured timeout."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Provider request timed out after {timeout}s")


class ResponseParsingError(EmailGenerationError):
    """
    Raised when the Gemini response does not match the expected envelope.

    Example: missing 'candidates' key, empty parts list, invalid JSON
    """
    pass
