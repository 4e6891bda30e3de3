"""Base provider interface for image-to-image generation."""

from typing import Optional, Protocol

from typing_extensions import runtime_checkable


@runtime_checkable
class ImageProvider(Protocol):
    """Protocol for providers that turn one image into another."""

    async def generate(self, image_bytes: bytes, mime_type: Optional[str] = None) -> bytes:
        """
        Generate a new image from a source image.

        Args:
            image_bytes: Raw bytes of the source image
            mime_type: MIME type of the source image (provider default if None)

        Returns:
            Raw bytes of the generated image

        Raises:
            ClientError: Provider-specific failures
        """
        ...
