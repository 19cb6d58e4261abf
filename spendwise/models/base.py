"""Declarative base and shared column mixins."""

from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Primary keys are INTEGER (int4 on PostgreSQL).
MAX_RECORD_ID = 2**31 - 1

USER_ID_MAX_LENGTH = 100

# Money columns are NUMERIC(12, 2).
AMOUNT_MAX_DIGITS = 12
AMOUNT_DECIMAL_PLACES = 2


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
