from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from app.core.config import settings
from app.core.schemas import ApiResponse


limiter = Limiter(key_func=get_remote_address)

DEFAULT_RATE_LIMIT = f"{settings.RATE_LIMIT_PER_MINUTE}/minute"


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Answer rate limited requests with the standard error envelope."""
    body = ApiResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        error="RateLimitExceeded",
        detail="Rate limit exceeded. Please try again later.",
    )
    return JSONResponse(status_code=status.HTTP_429_TOO_MANY_REQUESTS, content=body.model_dump())
