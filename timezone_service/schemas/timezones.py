from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TimezoneDetails(BaseModel):
    identifier: str = Field(
        ..., title="Identifier", description="Canonical Region/City name."
    )
    label: str = Field(..., title="Label", description="Display name with offset.")
    offset: float = Field(..., title="Offset", description="Hours from UTC.")
    region: str = Field(..., title="Region", description="Coarse grouping.")
    abbreviation: str = Field(
        ..., title="Abbreviation", description="Short zone code."
    )


class TimezoneInfo(TimezoneDetails):
    current_time: str = Field(
        ...,
        alias="currentTime",
        title="Current Time",
        description="Current wall-clock time in the zone.",
    )

    model_config = ConfigDict(populate_by_name=True)


class ConvertTimeRequest(BaseModel):
    """
    Conversion request body. Fields are optional here so that a missing one
    is reported as a 400 validation error rather than a 422 schema error.
    """

    from_timezone: Optional[str] = Field(
        None, alias="fromTimezone", description="Source zone identifier."
    )
    to_timezone: Optional[str] = Field(
        None, alias="toTimezone", description="Target zone identifier."
    )
    date_time: Optional[str] = Field(
        None, alias="dateTime", description="ISO-8601 instant to convert."
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("from_timezone", "to_timezone", "date_time", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def missing_fields(self) -> list[str]:
        return [
            alias
            for alias, value in (
                ("fromTimezone", self.from_timezone),
                ("toTimezone", self.to_timezone),
                ("dateTime", self.date_time),
            )
            if value is None
        ]
