"""Transaction model."""

import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from spendwise.models.base import (
    AMOUNT_DECIMAL_PLACES,
    AMOUNT_MAX_DIGITS,
    USER_ID_MAX_LENGTH,
    Base,
    TimestampMixin,
)
from spendwise.models.category import Category, category_column_type

DESCRIPTION_MAX_LENGTH = 200


class Transaction(Base, TimestampMixin):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(USER_ID_MAX_LENGTH), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(AMOUNT_MAX_DIGITS, AMOUNT_DECIMAL_PLACES), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(String(DESCRIPTION_MAX_LENGTH), nullable=False)
    category: Mapped[Category] = mapped_column(category_column_type(), nullable=False)

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
    )


# Listing and monthly reads filter on user + date range, breakdowns on user + category.
Index("idx_transactions_user_date", Transaction.user_id, Transaction.date.desc())
Index("idx_transactions_user_category", Transaction.user_id, Transaction.category)
