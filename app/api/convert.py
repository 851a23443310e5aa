"""Synchronous convert endpoint.

The conversion itself happens at the third-party service; this endpoint only
asks for it, checks the resulting file is reachable and describes it.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from app.core.errors import ConversionError
from app.services.converter_api import ConverterAPI
from app.services.download_probe import DownloadProbe
from app.services.metadata import compose_metadata, content_disposition
from app.services.validation import validate_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])

_converter_api = ConverterAPI()
_download_probe = DownloadProbe()


@router.get("/convert")
def convert(
    urls: List[str] = Query(default=[], alias="url"),
    conversion_types: List[str] = Query(default=[], alias="type"),
):
    """Convert `url` to `type` (mp3, mp4 or merged) and return the file metadata.

    A repeated query parameter counts with its first value.
    """
    url = urls[0] if urls else None
    conversion_type = conversion_types[0] if conversion_types else None
    logger.info(f"Received convert request: url={url} type={conversion_type}")

    try:
        request = validate_request(url, conversion_type)
        upstream = _converter_api.request_conversion(request)
        content_type, content_length = _download_probe.probe(upstream.url)
    except ConversionError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    metadata = compose_metadata(request, upstream, content_type, content_length)
    logger.info(f"Converted {request.url} -> {metadata.filename} ({metadata.mime_type})")

    return JSONResponse(
        content=metadata.model_dump(),
        headers={"Content-Disposition": content_disposition(metadata.filename)},
    )
