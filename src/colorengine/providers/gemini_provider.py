"""Gemini image-to-image provider."""

import logging
import os
from typing import Optional

import httpx
from pydantic import ValidationError

from colorengine.models.errors import DecodeError, RequestError, ResponseError
from colorengine.models.requests import GeminiImageConfig, ImagePayload, OutboundRequest
from colorengine.models.responses import InboundResponse
from colorengine.services.response_resolver import ResponseResolver

logger = logging.getLogger(__name__)

UNREADABLE_BODY = "Unknown error"


class GeminiImageProvider:
    """Image provider using the Gemini generateContent API."""

    def __init__(
        self,
        api_key: str | None = None,
        config: GeminiImageConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize Gemini provider.

        Args:
            api_key: Gemini API key (defaults to GEMINI_API_KEY environment variable)
            config: Request settings (model, instruction, MIME type)
            http_client: Shared HTTP client. When omitted the provider creates
                and owns one, configured with config.timeout_seconds.
        """
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY environment variable or api_key parameter is required")

        self.config = config or GeminiImageConfig()
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(timeout=self.config.timeout_seconds)
        self.resolver = ResponseResolver()

    async def __aenter__(self) -> "GeminiImageProvider":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self.client.aclose()

    def build_request(self, image_bytes: bytes, mime_type: Optional[str] = None) -> OutboundRequest:
        """Assemble the instruction + image request for the configured model."""
        image = ImagePayload(data=image_bytes, mime_type=mime_type or self.config.mime_type)
        return OutboundRequest.for_image(self.config.instruction, image)

    async def generate(self, image_bytes: bytes, mime_type: Optional[str] = None) -> bytes:
        """
        Send an image to Gemini and return the image it produces.

        Args:
            image_bytes: Raw bytes of the source image
            mime_type: MIME type of the source image (defaults to config.mime_type)

        Returns:
            Raw bytes of the generated image

        Raises:
            RequestError: If the request could not be sent or the body could not be read
            ResponseError: If Gemini answered with a non-success status
            DecodeError: If the body is not valid JSON or the image is not valid base64
            MissingResponse: If the reply carries no image payload
        """
        request = self.build_request(image_bytes, mime_type)
        http_request = self.client.build_request(
            "POST",
            self.config.endpoint_url(self.api_key),
            json=request.to_payload(),
        )

        logger.debug(
            f"📤 [GeminiProvider] Sending {len(image_bytes)} image bytes to model {self.config.model}"
        )
        try:
            response = await self.client.send(http_request, stream=True)
        except httpx.RequestError as e:
            raise RequestError(f"Gemini request failed: {str(e)}", original_exception=e) from e

        try:
            if not response.is_success:
                error_text = await self._read_error_body(response)
                logger.error(
                    f"❌ [GeminiProvider] Gemini API error: Status: {response.status_code}, Body: {error_text}"
                )
                raise ResponseError(response.status_code, error_text)

            try:
                body = await response.aread()
            except httpx.RequestError as e:
                raise RequestError(f"Failed to read Gemini response: {str(e)}", original_exception=e) from e
        finally:
            await response.aclose()

        logger.debug(f"📥 [GeminiProvider] Gemini API response received (length: {len(body)})")

        try:
            parsed = InboundResponse.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"Failed to parse JSON: {str(e)}", original_exception=e) from e

        return self.resolver.resolve(parsed)

    async def _read_error_body(self, response: httpx.Response) -> str:
        """Read an error body, falling back to a placeholder when it cannot be read."""
        try:
            await response.aread()
            return response.text
        except httpx.HTTPError:
            return UNREADABLE_BODY
