import time
from typing import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from shared.core.logging_config import get_logger

logger = get_logger(__name__)


class ExecutionTimeMiddleware(BaseHTTPMiddleware):
    """Logs each request's duration and echoes it in a response header."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        total_time = time.perf_counter() - start_time
        logger.info(
            "[API] %s %s -> %d in %.4f seconds",
            request.method,
            request.url.path,
            response.status_code,
            total_time,
        )
        response.headers["X-API-Execution-Time"] = f"{total_time:.4f} seconds"
        return response
