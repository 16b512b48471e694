"""FastAPI application entry point"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api.routes import ask_router, documents_router, system_router
from .config import Settings, get_settings
from .services import AnswerClient
from .utils.errors import ValidationError
from .utils.helpers import error_response, purge_upload_dir

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown tasks"""
    settings: Settings = app.state.settings
    logger.info("Starting AI Document Q&A API")
    os.makedirs(settings.upload_dir, exist_ok=True)
    logger.info(f"Upload directory: {settings.upload_dir}")
    if settings.gemini_api_key is None:
        logger.warning("Gemini API key is not configured; /api/ask will fail until it is set")

    yield

    logger.info("Shutting down AI Document Q&A API")
    removed = purge_upload_dir(settings.upload_dir)
    logger.info(f"Cleaned up {removed} temporary file(s)")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application

    Args:
        settings: Explicit settings; loaded from the environment when omitted

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="AI Document Q&A API",
        description="Upload a PDF or Excel file and ask questions about its content",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.answer_client = AnswerClient(settings=settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Include routers
    app.include_router(documents_router)
    app.include_router(ask_router, prefix="/api")
    app.include_router(system_router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "AI Document Q&A API",
            "version": __version__,
            "status": "running",
        }

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.error}")
        return error_response(exc.status_code, exc.error, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        return error_response(
            400,
            "Invalid request",
            "Request body is missing or malformed",
            exc=exc,
            include_details=settings.is_development,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and request.url.path.startswith("/api/"):
            return error_response(
                404,
                "Not found",
                "The requested API endpoint does not exist",
            )
        return error_response(exc.status_code, "Request failed", str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Global error handler: {exc}")
        return error_response(
            500,
            "Internal server error",
            "An unexpected error occurred",
            exc=exc,
            include_details=settings.is_development,
        )

    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "docqa.main:app",
        host="0.0.0.0",
        port=get_settings().port,
    )
