from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from lifespan import lifespan
from routes import api_router
from shared.core.config import Settings, get_settings
from shared.core.exceptions import BaseAPIException
from shared.core.request_context import request_context
from shared.utils.exception_handlers import (
    handle_422_exception,
    handle_api_exception,
)
from shared.utils.execution_time import ExecutionTimeMiddleware


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_context.set(request)  # store current request for api_response
        response: Response = await call_next(request)
        response.headers["X-Method"] = request.method
        response.headers["X-Path"] = request.url.path
        return response


async def handle_http_exceptions(
    request: Request, exc: HTTPException
) -> JSONResponse:
    path = request.url.path
    return JSONResponse(
        status_code=exc.status_code,
        content=(
            exc.detail
            if isinstance(exc.detail, dict)
            else {"message": str(exc.detail), "path": path}
        ),
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or get_settings()

    fastapi_app: FastAPI = FastAPI(
        title=app_settings.APP_NAME,
        openapi_url="/timezones.json",
        version=app_settings.VERSION,
        description=app_settings.DESCRIPTION,
        lifespan=lifespan,
        debug=app_settings.ENVIRONMENT == "development",
        redirect_slashes=True,
        swagger_ui_parameters={
            "filter": True,
            "docExpansion": "none",
            "displayRequestDuration": True,
        },
    )
    fastapi_app.state.settings = app_settings
    fastapi_app.state.timezone_catalog = None

    @fastapi_app.get(path="/", tags=["System"])
    async def root() -> dict[str, str]:
        return {
            "message": "Welcome to the Timezone Service API",
            "version": app_settings.VERSION,
            "docs_url": "/docs",
            "redoc_url": "/redoc",
        }

    @fastapi_app.get(path="/health", tags=["System"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "message": "API is running fine!"}

    fastapi_app.include_router(router=api_router)

    fastapi_app.add_middleware(
        middleware_class=CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.add_middleware(middleware_class=GZipMiddleware, minimum_size=1000)
    fastapi_app.add_middleware(ExecutionTimeMiddleware)
    fastapi_app.add_middleware(middleware_class=RequestLoggingMiddleware)

    fastapi_app.add_exception_handler(HTTPException, handle_http_exceptions)
    fastapi_app.add_exception_handler(BaseAPIException, handle_api_exception)
    fastapi_app.add_exception_handler(
        RequestValidationError, handle_422_exception
    )

    return fastapi_app


app: FastAPI = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        app="main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=True,
        use_colors=True,
    )
