"""Locate and decode the generated image inside a Gemini reply."""

import logging

from colorengine.models.errors import DecodeError, MissingResponse
from colorengine.models.responses import InboundResponse
from colorengine.utils.codec import decode, strip_artifact_fencing

logger = logging.getLogger(__name__)


class ResponseResolver:
    """
    Extract image bytes from the first part of the first candidate.

    Inline data is preferred over text. Once a representation is chosen its
    decode failure is reported as is; the resolver never retries with the
    other representation.
    """

    def resolve(self, response: InboundResponse) -> bytes:
        """
        Return the decoded image carried by the response.

        Args:
            response: Parsed generateContent reply

        Returns:
            Raw image bytes

        Raises:
            MissingResponse: If no candidate, content, part or payload is present
            DecodeError: If the chosen payload is not valid base64
        """
        if not response.candidates:
            raise MissingResponse()

        content = response.candidates[0].content
        if content is None or not content.parts:
            raise MissingResponse()

        part = content.parts[0]

        if part.inline_data is not None:
            try:
                image_bytes = decode(part.inline_data.data)
            except DecodeError as e:
                logger.warning(f"⚠️ [ResponseResolver] inlineData is not valid base64: {e.message}")
                raise DecodeError(
                    f"Failed to decode base64 image from inlineData: {e.message}",
                    original_exception=e,
                ) from e
            logger.debug(f"🖼️ [ResponseResolver] Resolved {len(image_bytes)} bytes from inlineData")
            return image_bytes

        if part.text is not None:
            try:
                image_bytes = decode(strip_artifact_fencing(part.text))
            except DecodeError as e:
                logger.warning(f"⚠️ [ResponseResolver] Text part is not valid base64: {e.message}")
                raise DecodeError(
                    f"Failed to decode base64 image from text: {e.message}",
                    original_exception=e,
                ) from e
            logger.debug(f"🖼️ [ResponseResolver] Resolved {len(image_bytes)} bytes from text")
            return image_bytes

        raise MissingResponse()
