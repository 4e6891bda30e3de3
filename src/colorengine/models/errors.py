"""Error definitions for ColorEngine."""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error category codes for image generation calls."""

    REQUEST_ERROR = "REQUEST_ERROR"
    RESPONSE_ERROR = "RESPONSE_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    MISSING_RESPONSE = "MISSING_RESPONSE"


class ClientError(Exception):
    """Base exception for every failure surfaced by the Gemini client."""

    error_code: Optional[ErrorCode] = None

    def __init__(self, message: str, original_exception: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception


class RequestError(ClientError):
    """The request could not be sent (network, TLS, DNS)."""

    error_code = ErrorCode.REQUEST_ERROR


class ResponseError(ClientError):
    """The service answered with a non-success status."""

    error_code = ErrorCode.RESPONSE_ERROR

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Gemini API error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(ClientError):
    """The response body or an embedded image payload could not be decoded."""

    error_code = ErrorCode.DECODE_ERROR


class MissingResponse(ClientError):
    """The response parsed but carried no usable image payload."""

    error_code = ErrorCode.MISSING_RESPONSE

    def __init__(self):
        super().__init__("Missing response from Gemini")
