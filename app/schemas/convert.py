from typing import Literal

from pydantic import BaseModel, field_validator

ConversionType = Literal["mp3", "mp4", "merged"]


class ConversionRequest(BaseModel):
    url: str
    type: ConversionType


class UpstreamResult(BaseModel):
    """JSON envelope returned by the conversion service."""

    status: str = ""
    url: str = ""
    title: str = ""
    ftype: str = ""
    fsize: str = ""
    error: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @property
    def succeeded(self) -> bool:
        return self.status == "ok" and bool(self.url)


class ConvertResponse(BaseModel):
    filename: str
    size: str
    mime_type: str
    download_url: str
