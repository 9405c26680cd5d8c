"""
Services module for external integrations and business logic.
"""

from services.email_generator import EmailGeneratorService
from services.gemini_client import GeminiClient

__all__ = ["EmailGeneratorService", "GeminiClient"]
