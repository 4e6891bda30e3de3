"""MIME type helpers for outbound images."""

from pathlib import PurePath

DEFAULT_MIME_TYPE = "image/png"

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


def mime_type_for_filename(filename: str) -> str:
    """
    Return the image MIME type for a filename, defaulting to PNG for unknown extensions.

    Callers use it to pick the mime_type argument of GeminiImageProvider.generate
    when the source image comes from a file.
    """
    return MIME_TYPES.get(PurePath(filename).suffix.lower(), DEFAULT_MIME_TYPE)
