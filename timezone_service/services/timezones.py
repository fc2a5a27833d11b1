from typing import Any, Optional

from pydantic import ValidationError as SchemaValidationError

from shared.core.exceptions import ValidationError
from shared.core.logging_config import get_logger
from timezone_service.schemas import ConvertTimeRequest, TimezoneDetails, TimezoneInfo
from timezone_service.services.catalog import TimezoneCatalog, TimezoneDescriptor
from timezone_service.services.conversion import (
    convert_between_zones,
    current_instant_in_zone,
    format_instant,
)

logger = get_logger(__name__)


def serialize_timezone(descriptor: TimezoneDescriptor) -> dict[str, Any]:
    return TimezoneDetails(**descriptor.to_dict()).model_dump()


def list_timezones(catalog: TimezoneCatalog) -> dict[str, Any]:
    timezones = [serialize_timezone(d) for d in catalog.list_all()]
    return {"timezones": timezones, "total": len(timezones)}


def group_timezones(catalog: TimezoneCatalog) -> dict[str, Any]:
    grouping = catalog.group_by_region()
    return {
        "timezonesByRegion": {
            region: [serialize_timezone(d) for d in descriptors]
            for region, descriptors in grouping.by_region.items()
        },
        "regions": list(grouping.regions),
    }


def describe_timezone(
    catalog: TimezoneCatalog, identifier: str, exact_suffix: bool = False
) -> Optional[dict[str, Any]]:
    """Descriptor plus its current wall-clock time, or None when unknown."""
    descriptor = catalog.lookup(identifier)
    if descriptor is None:
        logger.info("Timezone not found: %s", identifier)
        return None

    info = TimezoneInfo(
        **descriptor.to_dict(),
        current_time=current_instant_in_zone(
            descriptor.offset, exact_suffix=exact_suffix
        ),
    )
    return info.model_dump(by_alias=True)


def parse_conversion_request(body: Any) -> ConvertTimeRequest:
    """
    Read a raw convert body. An absent or non-object body is treated as
    empty so that it is reported as missing fields.
    """
    if not isinstance(body, dict):
        return ConvertTimeRequest()
    try:
        return ConvertTimeRequest.model_validate(body)
    except SchemaValidationError as e:
        raise ValidationError(
            "fromTimezone, toTimezone, and dateTime must be strings",
            details={
                "errors": [
                    {"loc": list(err["loc"]), "msg": err["msg"]}
                    for err in e.errors()
                ]
            },
        ) from e


def build_conversion(
    catalog: TimezoneCatalog, request: ConvertTimeRequest
) -> dict[str, Any]:
    """
    Convert ``request.date_time`` between two catalog zones.

    Missing fields are rejected before the catalog is consulted.
    """
    missing = request.missing_fields()
    if missing:
        raise ValidationError(
            "fromTimezone, toTimezone, and dateTime are required",
            details={"missing": missing},
        )

    from_tz = catalog.lookup(request.from_timezone)
    to_tz = catalog.lookup(request.to_timezone)
    if from_tz is None or to_tz is None:
        raise ValidationError(
            "Invalid timezone provided",
            details={
                "fromTimezone": request.from_timezone,
                "toTimezone": request.to_timezone,
            },
        )

    conversion = convert_between_zones(
        request.date_time, from_tz.offset, to_tz.offset
    )
    return {
        "originalTime": request.date_time,
        "fromTimezone": serialize_timezone(from_tz),
        "toTimezone": serialize_timezone(to_tz),
        "convertedTime": format_instant(conversion.converted_instant),
        "utcTime": format_instant(conversion.utc_instant),
    }
