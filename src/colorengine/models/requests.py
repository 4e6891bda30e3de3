"""Request models for ColorEngine."""

from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from colorengine.utils import codec

DEFAULT_INSTRUCTION = (
    "draw a colored and better version of this comic, with high quality graphics. "
    "Return ONLY the base64 encoded image string of the result, with no markdown formatting."
)


class GeminiImageConfig(BaseModel):
    """Immutable settings used to build requests to the Gemini API."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field("https://generativelanguage.googleapis.com", description="API host")
    api_version: str = Field("v1beta", description="API version path segment")
    model: str = Field("gemini-3-pro-image-preview", description="Gemini model identifier")
    instruction: str = Field(DEFAULT_INSTRUCTION, min_length=1, description="Instruction sent ahead of the image")
    mime_type: str = Field("image/png", description="MIME type attached to the outbound image")
    timeout_seconds: Optional[float] = Field(
        120.0,
        gt=0,
        description="Timeout for an HTTP client created by the provider (ignored for injected clients)",
    )

    def endpoint_url(self, api_key: str) -> str:
        """Build the generateContent URL for the configured model."""
        base = self.base_url.rstrip("/")
        return f"{base}/{self.api_version}/models/{self.model}:generateContent?key={api_key}"


class ImagePayload(BaseModel):
    """Raw image bytes tagged with their MIME type."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., description="Raw image bytes")
    mime_type: str = Field("image/png", description="MIME type of the image")

    def encoded(self) -> str:
        """Return the image bytes as base64 text."""
        return codec.encode(self.data)


class InlineData(BaseModel):
    """Base64 encoded attachment, used both in requests and responses."""

    model_config = ConfigDict(frozen=True)

    mime_type: str = Field(
        ...,
        validation_alias=AliasChoices("mimeType", "mime_type"),
        serialization_alias="mimeType",
        description="MIME type of the attachment",
    )
    data: str = Field(..., description="Base64 encoded bytes")


class TextPart(BaseModel):
    """Plain text part of a request."""

    model_config = ConfigDict(frozen=True)

    text: str


class InlineDataPart(BaseModel):
    """Binary attachment part of a request."""

    model_config = ConfigDict(frozen=True)

    inline_data: InlineData = Field(
        ...,
        validation_alias=AliasChoices("inlineData", "inline_data"),
        serialization_alias="inlineData",
    )


Part = Union[TextPart, InlineDataPart]


class Content(BaseModel):
    """Ordered parts of one request turn."""

    model_config = ConfigDict(frozen=True)

    parts: list[Part] = Field(..., min_length=1)


class OutboundRequest(BaseModel):
    """Body of a generateContent request."""

    model_config = ConfigDict(frozen=True)

    contents: list[Content] = Field(..., min_length=1)

    @classmethod
    def for_image(cls, instruction: str, image: ImagePayload) -> "OutboundRequest":
        """
        Build a request carrying an instruction followed by one image.

        The instruction part must come first: the service applies it to the
        attachment that follows.
        """
        return cls(
            contents=[
                Content(
                    parts=[
                        TextPart(text=instruction),
                        InlineDataPart(inline_data=InlineData(mime_type=image.mime_type, data=image.encoded())),
                    ]
                )
            ]
        )

    def to_payload(self) -> dict:
        """Serialize to the JSON body expected by the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
