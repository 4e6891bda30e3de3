"""Models package for ColorEngine."""

from colorengine.models.errors import (
    ClientError,
    DecodeError,
    ErrorCode,
    MissingResponse,
    RequestError,
    ResponseError,
)
from colorengine.models.requests import (
    Content,
    GeminiImageConfig,
    ImagePayload,
    InlineData,
    InlineDataPart,
    OutboundRequest,
    Part,
    TextPart,
)
from colorengine.models.responses import Candidate, InboundResponse, ResponseContent, ResponsePart

__all__ = [
    "ClientError",
    "DecodeError",
    "ErrorCode",
    "MissingResponse",
    "RequestError",
    "ResponseError",
    "Content",
    "GeminiImageConfig",
    "ImagePayload",
    "InlineData",
    "InlineDataPart",
    "OutboundRequest",
    "Part",
    "TextPart",
    "Candidate",
    "InboundResponse",
    "ResponseContent",
    "ResponsePart",
]
