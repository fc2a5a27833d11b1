"""
Database models package.

Usage:
    from shared.db.models import Timezone, TimezonesBase
"""

__version__ = "1.0.0"

from .base import TimezonesBase
from .timezones import Timezone

__all__ = [
    "TimezonesBase",
    "Timezone",
]
