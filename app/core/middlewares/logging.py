import logging
import time
from typing import Callable

from fastapi import Request

logger = logging.getLogger("app.requests")


async def request_logging_middleware(request: Request, call_next: Callable):
    """Log method, path, status and duration of every request."""
    start_time = time.perf_counter()

    response = await call_next(request)

    duration = time.perf_counter() - start_time
    logger.info("[%s] %s - %s - %.3fs", request.method, request.url.path, response.status_code, duration)

    return response
