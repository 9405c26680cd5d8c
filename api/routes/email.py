"""
Email reply generation API endpoint.

A single synchronous pass-through: the request is turned into a prompt,
sent to Gemini, and the generated reply is returned as plain text.
"""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse
import logfire

from api.dependencies import EmailGenerator
from schemas.email import EmailRequest


router = APIRouter(prefix="/api/email", tags=["Email Generation"])


@router.post("/generate", response_class=PlainTextResponse)
async def generate_email(request: EmailRequest, generator: EmailGenerator):
    """
    Generate a reply to an email.

    Args:
        request: Email content and optional tone
        generator: Shared email generator (injected by dependency)

    Returns:
        PlainTextResponse 200: Generated reply text. A malformed Gemini response
        also lands here as "Error processing request: ..." unless strict parsing
        is enabled.
        PlainTextResponse 400: "Error generating email: <message>" when generation
        raised (transport failure, timeout, strict parsing failure)

    Raises:
        HTTPException 422: If the body does not match EmailRequest (handled by FastAPI)
    """
    with logfire.span("api.generate_email", tone=request.tone):
        logfire.info(
            "Received email generation request",
            tone=request.tone,
            content_length=len(request.email_content)
        )

        try:
            reply = await generator.generate_email(request)
        except Exception as e:
            logfire.error(
                "Error generating email",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=True
            )
            return PlainTextResponse(
                f"Error generating email: {e}",
                status_code=status.HTTP_400_BAD_REQUEST
            )

        logfire.info("Email generation successful", reply_length=len(reply))
        return PlainTextResponse(reply)
