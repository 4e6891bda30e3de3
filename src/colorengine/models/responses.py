"""Response models for the Gemini generateContent reply.

Every level of the reply is optional. Absence is not an error here; the
resolver decides what a missing level means.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from colorengine.models.requests import InlineData


class ResponsePart(BaseModel):
    """One part of a candidate's content."""

    model_config = ConfigDict(frozen=True)

    text: Optional[str] = Field(None, description="Free-form text, possibly base64 image data")
    inline_data: Optional[InlineData] = Field(
        None,
        validation_alias=AliasChoices("inlineData", "inline_data"),
        description="Structured binary payload",
    )


class ResponseContent(BaseModel):
    """Content of a candidate."""

    model_config = ConfigDict(frozen=True)

    parts: Optional[list[ResponsePart]] = None


class Candidate(BaseModel):
    """One proposed result."""

    model_config = ConfigDict(frozen=True)

    content: Optional[ResponseContent] = None


class InboundResponse(BaseModel):
    """Parsed body of a successful generateContent call."""

    model_config = ConfigDict(frozen=True)

    candidates: Optional[list[Candidate]] = None
