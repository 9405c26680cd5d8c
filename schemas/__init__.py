"""
Pydantic schemas for request/response validation.
"""

from schemas.email import (
    EmailRequest,
    GeminiRequest,
    GeminiContent,
    GeminiPart,
)

__all__ = [
    # Email schemas
    "EmailRequest",

    # Gemini envelopes
    "GeminiRequest",
    "GeminiContent",
    "GeminiPart",
]
