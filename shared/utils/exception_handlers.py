# utils/exception_handlers.py

from functools import wraps
from typing import Any, Callable

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.core.api_response import api_response, build_response_body
from shared.core.exceptions import BaseAPIException
from shared.core.logging_config import get_logger

logger = get_logger(__name__)


def handle_general_exception(e: Exception) -> JSONResponse:
    """
    Handles unhandled server-side exceptions.
    Logs and returns a standard API response.
    """
    logger.exception("Unhandled error: %s", e)
    return api_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=f"Something went wrong. {e}",
        log_error=True,
    )


async def handle_api_exception(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    """Render a domain exception into the standard envelope."""
    if exc.status_code >= 500:
        logger.error(
            "%s on %s: %s", exc.error_code, request.url.path, exc.message
        )
    else:
        logger.warning(
            "%s on %s: %s", exc.error_code, request.url.path, exc.message
        )

    body = build_response_body(exc.status_code, exc.message)
    body["errorCode"] = exc.error_code
    if exc.details:
        body["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_422_exception(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handles Pydantic validation errors raised at runtime.
    """
    logger.warning("Validation error on %s: %s", request.url, exc.errors())
    body = build_response_body(
        status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error"
    )
    body["details"] = jsonable_errors(exc)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


def exception_handler(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for endpoints to standardize exception handling.
    HTTP and domain exceptions pass through to the app handlers,
    anything else becomes a 500 response.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except (HTTPException, BaseAPIException):
            raise
        except Exception as e:
            return handle_general_exception(e)

    return wrapper
