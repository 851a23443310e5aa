"""Check that a converted file is reachable and read its headers.

Only the response headers are used; on success the body is never read.
"""

import logging
from typing import Optional, Tuple

import httpx

from app.core.config import HTTP_TIMEOUT
from app.core.errors import DownloadBadStatus, DownloadUnreachable

logger = logging.getLogger(__name__)


class DownloadProbe:
    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.timeout = timeout
        self.transport = transport

    def probe(self, url: str) -> Tuple[str, str]:
        """Return (content_type, content_length) of `url`, empty when absent."""
        try:
            with httpx.Client(
                timeout=self.timeout, follow_redirects=True, transport=self.transport
            ) as client:
                with client.stream("GET", url) as response:
                    if response.status_code != 200:
                        body = response.read().decode("utf-8", errors="replace")
                        logger.error(
                            f"Download URL returned non-200 status: "
                            f"{response.status_code}, Body: {body}"
                        )
                        raise DownloadBadStatus(
                            f"Failed to download converted file: Status {response.status_code}"
                        )
                    content_type = response.headers.get("content-type", "")
                    content_length = response.headers.get("content-length", "")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error downloading converted file: {e}")
            raise DownloadUnreachable(f"Failed to download converted file: {e}")

        return content_type, content_length
