"""Describe a converted file: filename, MIME type, size and download link."""

import logging
import time
from typing import Optional
from urllib.parse import quote

from app.schemas.convert import ConversionRequest, ConvertResponse, UpstreamResult

logger = logging.getLogger(__name__)

FALLBACK_FILENAME_PREFIX = "converted_video_"

DEFAULT_MIME_TYPES = {
    "mp3": "audio/mpeg",
    "mp4": "video/mp4",
    "merged": "video/mp4",
}

# Left unescaped in a URL path segment, besides unreserved characters.
_PATH_SEGMENT_SAFE = "$&+:=@"


def file_extension(conversion_type: str, content_type: str) -> str:
    if conversion_type == "mp3":
        return ".mp3"
    if conversion_type == "mp4":
        return ".mp4"
    if conversion_type == "merged":
        return ".webm" if "video/webm" in content_type else ".mp4"
    return ""


def build_filename(
    title: str, conversion_type: str, content_type: str, now: Optional[float] = None
) -> str:
    stem = title
    if not stem:
        timestamp = int(time.time() if now is None else now)
        stem = f"{FALLBACK_FILENAME_PREFIX}{timestamp}"
    return stem + file_extension(conversion_type, content_type)


def resolve_mime_type(conversion_type: str, content_type: str) -> str:
    if content_type:
        return content_type
    return DEFAULT_MIME_TYPES.get(conversion_type, "application/octet-stream")


def compose_metadata(
    request: ConversionRequest,
    upstream: UpstreamResult,
    content_type: str,
    content_length: str,
) -> ConvertResponse:
    """Combine the service envelope and the probed headers into the response body.

    Size is only known when the file host sends Content-Length; the file is
    never fetched to measure it.
    """
    filename = build_filename(upstream.title, request.type, content_type)
    if not content_length:
        logger.debug(f"No Content-Length for {upstream.url}, size left empty")

    return ConvertResponse(
        filename=filename,
        size=content_length,
        mime_type=resolve_mime_type(request.type, content_type),
        download_url=upstream.url,
    )


def content_disposition(filename: str) -> str:
    return f'attachment; filename="{quote(filename, safe=_PATH_SEGMENT_SAFE)}"'
