from datetime import datetime

from sqlalchemy import DateTime, Float, String, func
from sqlalchemy.orm import Mapped, mapped_column

from shared.db.models.base import TimezonesBase


class Timezone(TimezonesBase):
    __tablename__ = "timezones"

    identifier: Mapped[str] = mapped_column(
        String(length=64), primary_key=True, unique=True
    )
    label: Mapped[str] = mapped_column(String(length=128), nullable=False)
    offset: Mapped[float] = mapped_column(Float, nullable=False)
    region: Mapped[str] = mapped_column(String(length=64), nullable=False)
    abbreviation: Mapped[str] = mapped_column(
        String(length=16), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=True, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        server_default=func.now(),
        onupdate=func.now(),
    )
