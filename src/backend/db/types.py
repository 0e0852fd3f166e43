"""
Portable SQLAlchemy column types and expression helpers.

The schema runs on PostgreSQL in production and SQLite in development and
tests, so nothing here relies on dialect-specific types.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime, case
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware datetime column.

    Naive values are rejected on write. SQLite drops the offset on storage, so
    values read back without tzinfo are tagged as UTC.

    Usage in models:
        created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now)
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("UTCDateTime columns require timezone-aware datetimes")
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Current instant in UTC."""
    return datetime.now(timezone.utc)


def enum_order(column: ColumnElement, enum_cls: type[Enum]) -> ColumnElement:
    """
    Sort key ranking a string enum column by declaration order.

    Enum columns are stored as plain strings, so ``ORDER BY status`` would sort
    alphabetically; this yields the lifecycle order instead. Unknown values
    sort last.
    """
    return case(
        {member.value: index for index, member in enumerate(enum_cls)},
        value=column,
        else_=len(enum_cls),
    )
