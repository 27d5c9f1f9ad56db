"""Render domain errors as JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors import SocialHubError
from ..utils.logger import get_app_logger


async def handle_domain_error(request: Request, exc: SocialHubError) -> JSONResponse:
    """Map a SocialHubError onto its HTTP status."""
    if exc.status_code >= 500:
        get_app_logger().error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "detail": exc.message}
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SocialHubError, handle_domain_error)
