from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.requests import Request

from shared.core.logging_config import get_logger
from shared.core.request_context import request_context

logger = get_logger("api_response")


def build_response_body(
    status_code: int,
    message: str,
    data: Optional[Any] = None,
) -> dict[str, Any]:
    """Assemble the standard response envelope for the current request."""
    try:
        request: Request = request_context.get()
        method: Optional[str] = request.method
        path: Optional[str] = request.url.path
    except LookupError:
        method = None
        path = None

    response_body: dict[str, Any] = {
        "statusCode": status_code,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "method": method,
        "path": path,
    }
    if data is not None:
        response_body["data"] = jsonable_encoder(data)
    return response_body


def api_response(
    status_code: int,
    message: str,
    data: Optional[Any] = None,
    log_error: bool = False,
    suppress_raise: bool = False,
) -> JSONResponse:
    """
    Unified API response handler.

    Client errors (4xx) are raised as ``HTTPException`` carrying the envelope
    unless ``suppress_raise`` is set.
    """
    response_body = build_response_body(status_code, message, data)

    if log_error or status_code >= 400:
        logger.error(
            {
                "status_code": status_code,
                "message": message,
                "method": response_body["method"],
                "path": response_body["path"],
                "data": data,
            }
        )
    else:
        logger.info({"message": message})

    if 400 <= status_code < 500 and not suppress_raise:
        raise HTTPException(status_code=status_code, detail=response_body)

    return JSONResponse(status_code=status_code, content=response_body)
