from fastapi import Request

from shared.core.config import Settings
from shared.core.exceptions import InfrastructureError
from shared.core.logging_config import get_logger
from timezone_service.services.catalog import TimezoneCatalog

logger = get_logger(__name__)


def get_timezone_catalog(request: Request) -> TimezoneCatalog:
    """The catalog loaded at startup and attached to the application."""
    catalog = getattr(request.app.state, "timezone_catalog", None)
    if catalog is None:
        logger.error("Timezone catalog requested before startup completed")
        raise InfrastructureError("Timezone catalog is not loaded")
    return catalog


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
