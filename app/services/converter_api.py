"""Client for the third-party conversion service.

The service exposes one endpoint per conversion type, `<base>/<type>?url=...`,
and answers with a JSON envelope: {status, url, title, ftype, fsize, error}.
The converted file is hosted by the service at the returned `url`.
"""

import logging

import requests
from pydantic import ValidationError

from app.core.config import CONVERTER_API_URL, HTTP_TIMEOUT
from app.core.errors import (
    UpstreamBadStatus,
    UpstreamLogicalFailure,
    UpstreamMalformedResponse,
    UpstreamUnreachable,
)
from app.schemas.convert import ConversionRequest, UpstreamResult

logger = logging.getLogger(__name__)


class ConverterAPI:
    def __init__(
        self,
        base_url: str = CONVERTER_API_URL,
        timeout: float = HTTP_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def endpoint(self, conversion_type: str) -> str:
        return f"{self.base_url}/{conversion_type}"

    def request_conversion(self, request: ConversionRequest) -> UpstreamResult:
        """Ask the service to convert `request.url` and return its envelope."""
        endpoint = self.endpoint(request.type)
        logger.info(f"Calling conversion service: {endpoint} (url={request.url})")

        try:
            response = requests.get(
                endpoint, params={"url": request.url}, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Error connecting to conversion service: {e}")
            raise UpstreamUnreachable(f"Failed to connect to conversion service: {e}")

        if response.status_code != 200:
            logger.error(
                f"Conversion service returned non-200 status: {response.status_code}, "
                f"Body: {response.text}"
            )
            raise UpstreamBadStatus(
                f"Conversion service returned an error: Status {response.status_code}"
            )

        try:
            result = UpstreamResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Error decoding conversion service response: {e}")
            raise UpstreamMalformedResponse(
                f"Failed to parse conversion service response: {e}"
            )

        if not result.succeeded:
            logger.error(
                f"Conversion service status not 'ok' or URL empty: "
                f"{result.status}, Error: {result.error}"
            )
            raise UpstreamLogicalFailure(
                f"Conversion failed: {result.error or 'Unknown error from conversion service'}"
            )

        logger.info(f"Conversion service returned download URL: {result.url}")
        return result
