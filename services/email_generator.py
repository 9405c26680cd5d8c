"""Email reply generation service backed by the Gemini API."""

import logfire

from schemas.email import EmailRequest
from services.exceptions import ResponseParsingError
from services.gemini_client import GeminiClient

BASE_INSTRUCTION = (
    "Generate a professional email reply for the following email content. "
    "Please don't generate a subject line "
)


class EmailGeneratorService:
    """
    Builds the reply prompt, calls Gemini and extracts the generated text.

    Holds no per-request state, so a single instance is shared by all requests.
    """

    def __init__(self, client: GeminiClient, strict_parsing: bool = False):
        """
        Args:
            client: Gemini client used for the outbound call
            strict_parsing: Raise ResponseParsingError on a malformed Gemini
                response instead of returning an in-band error string
        """
        self.client = client
        self.strict_parsing = strict_parsing

    def build_prompt(self, request: EmailRequest) -> str:
        """
        Build the natural-language prompt for a reply.

        Args:
            request: Incoming email content and optional tone

        Returns:
            Fixed instruction, optional tone clause and the original email
        """
        prompt = BASE_INSTRUCTION
        if request.has_tone:
            prompt += f"Use a {request.tone} tone."
        prompt += f"\nOriginal email content: \n{request.email_content}"

        logfire.debug("Prompt built", prompt=prompt)
        return prompt

    async def generate_email(self, request: EmailRequest) -> str:
        """
        Generate a reply for the given email.

        Args:
            request: Incoming email content and optional tone

        Returns:
            Generated reply text, or an "Error processing request: ..." string
            when the Gemini response cannot be parsed (non-strict mode)

        Raises:
            ProviderTransportError: If the Gemini call fails (including timeouts)
            ResponseParsingError: If the response is malformed and strict_parsing is on
        """
        with logfire.span(
            "email_generator.generate",
            tone=request.tone,
            content_length=len(request.email_content)
        ):
            prompt = self.build_prompt(request)
            payload = self.client.build_request(prompt)

            response_body = await self.client.send(payload)

            return self.extract_response_content(response_body)

    def extract_response_content(self, response_body: str) -> str:
        """
        Pull the generated text out of a Gemini response body.

        Parse failures become "Error processing request: <details>" unless
        strict_parsing is enabled, in which case they are raised.
        """
        logfire.debug("Extracting response content", response=response_body)
        try:
            content = self.client.parse_response(response_body)
        except ResponseParsingError as e:
            logfire.error(
                "Error processing Gemini response",
                error=str(e),
                strict=self.strict_parsing
            )
            if self.strict_parsing:
                raise
            return f"Error processing request: {e}"

        logfire.info("Response content extracted", length=len(content))
        return content
