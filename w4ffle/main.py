import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from w4ffle.config import get_settings
from w4ffle.db.factory import make_database
from w4ffle.exceptions import BadImageKey, ImageNotFound, PuzzleNotFound
from w4ffle.middlewares import origin_policy_middleware
from w4ffle.responses import PrettyJSONResponse
from w4ffle.routers import health, images, puzzles
from w4ffle.services.storage.factory import make_image_store

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan for the API.
    """
    logger.info("Starting puzzle API...")

    database = make_database()
    app.state.database = database
    logger.info("Database connected")

    app.state.image_store = make_image_store()
    logger.info(f"Image store ready (bucket: {settings.minio_bucket})")

    logger.info("API ready")
    yield

    # Cleanup
    database.teardown()
    logger.info("API shutdown complete")


async def puzzle_not_found_handler(request: Request, exc: PuzzleNotFound):
    return PrettyJSONResponse(
        {"error": "No puzzle seeded for today", "date": exc.date},
        status_code=404,
    )


async def bad_image_key_handler(request: Request, exc: BadImageKey):
    return PlainTextResponse("Bad Request", status_code=400)


async def image_not_found_handler(request: Request, exc: ImageNotFound):
    logger.warning("Image key has no stored object", extra={"key": exc.key})
    return PlainTextResponse("Not Found", status_code=404)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods are both plain "Not Found"
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return PrettyJSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


app = FastAPI(
    title="w4ffle",
    description="Daily visual puzzle API with an image proxy.",
    version=settings.app_version,
    lifespan=lifespan,
    default_response_class=PrettyJSONResponse,
    redirect_slashes=False,
)

app.middleware("http")(origin_policy_middleware)

app.add_exception_handler(PuzzleNotFound, puzzle_not_found_handler)
app.add_exception_handler(BadImageKey, bad_image_key_handler)
app.add_exception_handler(ImageNotFound, image_not_found_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)

app.include_router(health.router, prefix="/api")
app.include_router(puzzles.router, prefix="/api")
app.include_router(images.router)


if __name__ == "__main__":
    uvicorn.run(app, port=8000, host="0.0.0.0")
