from contextvars import ContextVar

from fastapi import Request

# Set per request by RequestLoggingMiddleware; read by api_response to
# stamp the method and path into the response envelope.
request_context: ContextVar[Request] = ContextVar("request_context")
