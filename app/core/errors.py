"""Failures of the convert pipeline.

Each error carries the HTTP status the route answers with; the message is
the plain text body sent back to the caller.
"""


class ConversionError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ConversionError):
    status_code = 400


class MissingParameterError(ValidationError):
    def __init__(self):
        super().__init__("Missing 'url' or 'type' parameter")


class InvalidTypeError(ValidationError):
    def __init__(self, conversion_type: str):
        super().__init__("Invalid 'type' parameter. Must be 'mp3', 'mp4', or 'merged'.")
        self.conversion_type = conversion_type


class UpstreamUnreachable(ConversionError):
    status_code = 502


class UpstreamBadStatus(ConversionError):
    status_code = 502


class UpstreamMalformedResponse(ConversionError):
    status_code = 500


class UpstreamLogicalFailure(ConversionError):
    status_code = 502


class DownloadUnreachable(ConversionError):
    status_code = 500


class DownloadBadStatus(ConversionError):
    status_code = 500
