"""
base.py

SQLAlchemy Declarative Base class with:
- Constraint naming conventions
- A readable __repr__ for debugging
- SQLAlchemy 2.0 compliant structure
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Naming convention for constraints (Alembic migration friendly)
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(table_name)s_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata_obj: MetaData = MetaData(naming_convention=NAMING_CONVENTION)


class TimezonesBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models in the timezone service.
    """

    metadata = metadata_obj

    def __repr__(self) -> str:
        """
        Example: <Timezone(identifier='Asia/Tashkent', offset=5.0, ...)>
        """
        values: str = ", ".join(
            f"{col.name}={getattr(self, col.name)!r}"
            for col in self.__table__.columns
        )
        return f"<{self.__class__.__name__}({values})>"
