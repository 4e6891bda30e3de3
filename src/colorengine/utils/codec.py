"""Base64 codec for image payloads exchanged with Gemini."""

import base64
import binascii

from colorengine.models.errors import DecodeError

# Markers some text responses wrap around the encoded image.
# The language-tagged fence must be removed before the bare one.
FENCE_MARKERS = ("```base64", "```")


def encode(data: bytes) -> str:
    """Encode raw bytes as standard, padded base64 text."""
    return base64.b64encode(data).decode("ascii")


def decode(text: str) -> bytes:
    """
    Decode standard base64 text back to raw bytes.

    Decoding is strict: characters outside the base64 alphabet (including
    whitespace) and malformed padding are rejected.

    Args:
        text: Base64 encoded text

    Returns:
        Decoded bytes

    Raises:
        DecodeError: If the text is not valid base64
    """
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 payload: {str(e)}", original_exception=e) from e

    # Trailing bits beyond the last full byte must be zero.
    if encode(data) != text:
        raise DecodeError("Invalid base64 payload: non-canonical trailing bits")
    return data


def strip_artifact_fencing(text: str) -> str:
    """Remove markdown fence markers around an encoded payload and trim whitespace."""
    for marker in FENCE_MARKERS:
        text = text.replace(marker, "")
    return text.strip()
