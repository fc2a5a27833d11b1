# timezones.py (Router)
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from starlette.responses import JSONResponse

from shared.core.api_response import api_response
from shared.core.config import Settings
from shared.core.exceptions import NotFoundError
from shared.dependencies.timezones import get_app_settings, get_timezone_catalog
from shared.utils.exception_handlers import exception_handler
from timezone_service.services.catalog import TimezoneCatalog
from timezone_service.services.timezones import (
    build_conversion,
    describe_timezone,
    group_timezones,
    list_timezones,
    parse_conversion_request,
)

router = APIRouter()


@router.get("", summary="List all supported timezones")
@exception_handler
async def get_all_timezones(
    catalog: TimezoneCatalog = Depends(get_timezone_catalog),
) -> JSONResponse:
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Timezones retrieved successfully.",
        data=list_timezones(catalog),
    )


@router.get("/grouped/regions", summary="List timezones grouped by region")
@exception_handler
async def get_timezones_by_region(
    catalog: TimezoneCatalog = Depends(get_timezone_catalog),
) -> JSONResponse:
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Timezones grouped by region retrieved successfully.",
        data=group_timezones(catalog),
    )


@router.get(
    "/info/{region}/{city}",
    summary="Get a timezone and its current time by Region/City",
)
@exception_handler
async def get_timezone_info(
    region: str,
    city: str,
    catalog: TimezoneCatalog = Depends(get_timezone_catalog),
    app_settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    identifier = f"{region}/{city}"
    timezone_info = describe_timezone(
        catalog,
        identifier,
        exact_suffix=app_settings.TIMEZONE_EXACT_OFFSET_SUFFIX,
    )

    if timezone_info is None:
        raise NotFoundError(
            "Timezone not found.", details={"requested": identifier}
        )

    return api_response(
        status_code=status.HTTP_200_OK,
        message="Timezone retrieved successfully.",
        data={"timezone": timezone_info},
    )


@router.post("/convert", summary="Convert a time between two timezones")
@exception_handler
async def convert_time(
    payload: Any = Body(
        None,
        description="fromTimezone, toTimezone and dateTime (ISO-8601).",
        examples=[
            {
                "fromTimezone": "Asia/Karachi",
                "toTimezone": "America/Los_Angeles",
                "dateTime": "2024-01-01T00:00:00Z",
            }
        ],
    ),
    catalog: TimezoneCatalog = Depends(get_timezone_catalog),
) -> JSONResponse:
    request = parse_conversion_request(payload)
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Time converted successfully.",
        data={"conversion": build_conversion(catalog, request)},
    )
