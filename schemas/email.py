"""Email reply schemas and the Gemini wire envelopes."""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class EmailRequest(BaseModel):
    """Request schema for POST /api/email/generate"""

    email_content: str = Field(
        ...,
        alias="emailContent",
        description="Original email text to reply to"
    )

    tone: Optional[str] = Field(
        default=None,
        description="Optional tone for the reply, e.g. friendly or formal"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "emailContent": "Hi, can we move tomorrow's meeting to Friday?",
                "tone": "friendly"
            }
        }
    )

    @property
    def has_tone(self) -> bool:
        return bool(self.tone)


# ============================================================================
# Gemini generateContent envelopes
# ============================================================================

class GeminiPart(BaseModel):
    text: str


class GeminiContent(BaseModel):
    parts: List[GeminiPart]


class GeminiRequest(BaseModel):
    """Body sent to the Gemini generateContent endpoint."""

    contents: List[GeminiContent]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GeminiRequest":
        return cls(contents=[GeminiContent(parts=[GeminiPart(text=prompt)])])
