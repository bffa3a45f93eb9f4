import logging
from typing import Dict, Optional

from fastapi import Request, Response

from w4ffle.config import Settings, get_settings
from w4ffle.responses import PrettyJSONResponse

logger = logging.getLogger(__name__)


def cors_headers(origin: Optional[str], settings: Settings) -> Dict[str, str]:
    """CORS headers for a request declaring ``origin``.

    Allowlisted origins are echoed back; anything else gets the default origin.
    """
    allowed_origin = (
        origin if origin and origin in settings.cors_allowed_origins else settings.cors_default_origin
    )
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Methods": settings.cors_allow_methods,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
        "Access-Control-Max-Age": str(settings.cors_max_age),
    }


def log_request(method: str, path: str, status_code: int) -> None:
    """Simple request logging"""
    logger.info(f"{method} {path} -> {status_code}")


def log_error(error: str, method: str, path: str) -> None:
    """Simple error logging"""
    logger.error(f"Error in {method} {path}: {error}")


async def origin_policy_middleware(request: Request, call_next) -> Response:
    """Answer preflights and stamp CORS headers on every response."""
    cors = cors_headers(request.headers.get("origin"), get_settings())

    if request.method == "OPTIONS":
        response = Response(status_code=204, headers=cors)
        log_request(request.method, request.url.path, response.status_code)
        return response

    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception("Unhandled error while serving request")
        log_error(str(e), request.method, request.url.path)
        response = PrettyJSONResponse({"error": "Internal Server Error"}, status_code=500)

    response.headers.update(cors)
    log_request(request.method, request.url.path, response.status_code)
    return response
