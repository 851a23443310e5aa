import logging
import os

PORT_STR = os.getenv("PORT", "8080")
if not PORT_STR.isdigit():
    raise ValueError(f"Invalid PORT: {PORT_STR}")
PORT = int(PORT_STR)

LOG_LEVEL_STR = os.getenv("LOG_LEVEL", "INFO")
LOG_LEVEL = getattr(logging, LOG_LEVEL_STR.upper(), None)
if not isinstance(LOG_LEVEL, int):
    raise ValueError(f"Invalid LOG_LEVEL: {LOG_LEVEL_STR}")

CONVERTER_API_URL = os.getenv("CONVERTER_API_URL", "https://api.vevioz.com/api/button").rstrip("/")
if not CONVERTER_API_URL:
    raise ValueError("CONVERTER_API_URL must not be empty")

HTTP_TIMEOUT = 30.0
