import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import LOG_LEVEL, PORT

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)

from app.api.convert import router as convert_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Media Convert Proxy",
    description="Convert media URLs to mp3/mp4 through a third-party conversion service",
    version="1.0.0",
)

app.include_router(convert_router)


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def run():
    import uvicorn

    logger.info(f"Server starting on port {PORT}...")
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
