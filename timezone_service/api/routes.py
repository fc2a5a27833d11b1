from fastapi import APIRouter

from timezone_service.api.v1.endpoints import timezones

timezone_router = APIRouter(prefix="/api/v1")

timezone_router.include_router(
    timezones.router, prefix="/timezones", tags=["Timezones"]
)
