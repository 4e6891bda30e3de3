"""ColorEngine - Gemini image-to-image client."""

from colorengine.models.errors import (
    ClientError,
    DecodeError,
    ErrorCode,
    MissingResponse,
    RequestError,
    ResponseError,
)
from colorengine.models.requests import GeminiImageConfig, ImagePayload, OutboundRequest
from colorengine.models.responses import InboundResponse
from colorengine.providers.base import ImageProvider
from colorengine.providers.gemini_provider import GeminiImageProvider
from colorengine.services.response_resolver import ResponseResolver
from colorengine.utils.codec import decode, encode, strip_artifact_fencing
from colorengine.utils.mime import mime_type_for_filename

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ClientError",
    "DecodeError",
    "ErrorCode",
    "MissingResponse",
    "RequestError",
    "ResponseError",
    # Request/response types
    "GeminiImageConfig",
    "ImagePayload",
    "InboundResponse",
    "OutboundRequest",
    # Providers
    "ImageProvider",
    "GeminiImageProvider",
    # Services
    "ResponseResolver",
    # Utilities
    "decode",
    "encode",
    "strip_artifact_fencing",
    "mime_type_for_filename",
]
