from .timezones import ConvertTimeRequest, TimezoneDetails, TimezoneInfo

__all__ = [
    "ConvertTimeRequest",
    "TimezoneDetails",
    "TimezoneInfo",
]
