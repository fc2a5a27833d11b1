from fastapi import APIRouter

from timezone_service.api.routes import timezone_router

api_router = APIRouter()

api_router.include_router(timezone_router)
