"""FastAPI application setup for the synthetic weather API."""

from fastapi import FastAPI, Request, status
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse

from .api import router as api_router
from .config import Settings, settings
from .errors import InvalidArgumentError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather_api/main")


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    """Translate core precondition failures into 400 responses."""
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    app_settings = app_settings or settings

    # Interactive docs are only exposed in development.
    docs_kwargs = {} if app_settings.is_development else {
        "docs_url": None,
        "redoc_url": None,
        "openapi_url": None,
    }
    application = FastAPI(title=app_settings.app_title, **docs_kwargs)

    if app_settings.https_redirect:
        logger.info("HTTPS redirection enabled")
        application.add_middleware(HTTPSRedirectMiddleware)

    application.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    application.include_router(api_router)
    return application


app = create_app()
