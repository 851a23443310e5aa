import logging
from typing import Optional

from app.core.errors import InvalidTypeError, MissingParameterError
from app.schemas.convert import ConversionRequest

logger = logging.getLogger(__name__)

CONVERSION_TYPES = ("mp3", "mp4", "merged")


def validate_request(url: Optional[str], conversion_type: Optional[str]) -> ConversionRequest:
    """Check the `url` and `type` query parameters of a convert request."""
    if not url or not conversion_type:
        logger.warning("Bad request: Missing 'url' or 'type'")
        raise MissingParameterError()

    if conversion_type not in CONVERSION_TYPES:
        logger.warning(f"Bad request: Invalid 'type' {conversion_type}")
        raise InvalidTypeError(conversion_type)

    return ConversionRequest(url=url, type=conversion_type)
