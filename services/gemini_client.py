"""
Gemini generateContent API integration.

Keeps the provider wire format (request envelope, response envelope and
the outbound call) behind a small interface so the email generator
never touches Gemini-specific JSON.
"""

import json
from typing import Any, Dict

import httpx
import logfire

from schemas.email import GeminiRequest
from services.exceptions import (
    ProviderTimeoutError,
    ProviderTransportError,
    ResponseParsingError,
)


class GeminiClient:
    """Client for the Gemini generateContent API."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        http_client: httpx.AsyncClient,
        timeout: float = 30.0
    ):
        """
        Initialize the Gemini client.

        Args:
            api_url: Base URL of the generateContent endpoint; the key is appended to it
            api_key: Gemini API key
            http_client: Shared connection-pooling client
            timeout: Request timeout in seconds
        """
        if not api_url or not api_key:
            raise ValueError(
                "Gemini API credentials missing. "
                "Set GEMINI_API_URL and GEMINI_API_KEY in environment."
            )

        self.api_url = api_url
        self.api_key = api_key
        self.http_client = http_client
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}{self.api_key}"

    def build_request(self, prompt: str) -> Dict[str, Any]:
        """Wrap a prompt in the contents -> parts -> text envelope."""
        return GeminiRequest.from_prompt(prompt).model_dump()

    def parse_response(self, body: str) -> str:
        """
        Extract candidates[0].content.parts[0].text from a response body.

        Raises:
            ResponseParsingError: If the body is not JSON or lacks the expected fields
        """
        try:
            data = json.loads(body)
        except (TypeError, ValueError) as e:
            raise ResponseParsingError(f"Invalid JSON in provider response: {e}") from e

        try:
            candidates = data["candidates"]
            if not candidates:
                raise ResponseParsingError("Provider response contains no candidates")

            parts = candidates[0]["content"]["parts"]
            if not parts:
                raise ResponseParsingError("Provider candidate contains no parts")

            text = parts[0]["text"]
        except KeyError as e:
            raise ResponseParsingError(f"Missing field {e} in provider response") from e
        except (IndexError, TypeError) as e:
            raise ResponseParsingError(f"Unexpected provider response structure: {e}") from e

        if not isinstance(text, str):
            raise ResponseParsingError(
                f"Expected text to be a string, got {type(text).__name__}"
            )

        return text

    async def send(self, payload: Dict[str, Any]) -> str:
        """
        POST an envelope to Gemini and return the raw response body.

        Raises:
            ProviderTimeoutError: If Gemini does not answer within the timeout
            ProviderTransportError: On network errors or non-2xx responses
        """
        logfire.info("Calling Gemini API", timeout=self.timeout)

        try:
            response = await self.http_client.post(
                self.endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logfire.error("Gemini API timeout", timeout=self.timeout)
            raise ProviderTimeoutError(self.timeout) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logfire.error(
                "Gemini API HTTP error",
                status_code=status_code,
                response=e.response.text[:500]  # Truncate for logging
            )
            raise ProviderTransportError(
                f"Provider returned HTTP {status_code}",
                status_code=status_code
            ) from e
        except httpx.HTTPError as e:
            # str(e) may include the URL, which carries the API key
            logfire.error("Gemini API request failed", error_type=type(e).__name__)
            raise ProviderTransportError(
                f"Provider request failed: {type(e).__name__}"
            ) from e

        logfire.info(
            "Gemini API response received",
            status_code=response.status_code,
            size_bytes=len(response.content)
        )

        return response.text
