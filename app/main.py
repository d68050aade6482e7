import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from app.core.bootstrap import bootstrap_app
from app.core.config import settings
from app.core.middlewares import (
    limiter,
    rate_limit_exceeded_handler,
    request_logging_middleware,
    security_headers_middleware,
)
from app.core.models import UserLookupError
from app.core.schemas import ApiResponse
from app.db import db_manager

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handles application startup and shutdown, releasing the database pool on exit.
    """
    logger.info("Starting application...")

    yield

    logger.info("Shutting down application...")
    await db_manager.dispose()
    logger.info("Database pool disposed.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    version=settings.VERSION,
    lifespan=lifespan,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc"
)

# Add rate limiter state to app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS", "HEAD"],
    allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
    max_age=600,
)


@app.exception_handler(UserLookupError)
async def user_lookup_exception_handler(request: Request, exc: UserLookupError):
    """
    Translate domain errors into their HTTP status. The error kind is carried
    by the exception type, the message is informational only.
    """
    body = ApiResponse(
        status_code=exc.status_code,
        error=exc.__class__.__name__,
        detail=exc.message,
    )
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=headers)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler. Storage and driver errors are logged server-side
    and never echoed back to the client.
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    body = ApiResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error="InternalServerError",
        detail="An unexpected error occurred.",
    ).model_dump()

    # Only include traceback when debugging locally
    if settings.DEBUG:
        body["data"] = {"traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))}

    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)


# Security headers middleware
app.middleware("http")(security_headers_middleware)

# Request logging middleware
app.middleware("http")(request_logging_middleware)


bootstrap_app(app)


# Health check endpoint (useful for monitoring)
@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
