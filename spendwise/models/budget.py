"""Budget model."""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from spendwise.models.base import (
    AMOUNT_DECIMAL_PLACES,
    AMOUNT_MAX_DIGITS,
    USER_ID_MAX_LENGTH,
    Base,
    TimestampMixin,
)
from spendwise.models.category import Category, category_column_type

MIN_BUDGET_YEAR = 2020

# Columns of the (user, category, period) uniqueness constraint, reused as the
# conflict target of the budget upsert.
BUDGET_PERIOD_KEY = ("user_id", "category", "month", "year")


class Budget(Base, TimestampMixin):
    """Spending limit for one category in one calendar month.

    At most one row exists per (user_id, category, month, year); the database
    enforces it and the store upserts against that constraint.
    """

    __tablename__ = "budgets"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(USER_ID_MAX_LENGTH), nullable=False)
    category: Mapped[Category] = mapped_column(category_column_type(), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(AMOUNT_MAX_DIGITS, AMOUNT_DECIMAL_PLACES), nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint(*BUDGET_PERIOD_KEY, name="uq_budgets_user_category_period"),
        CheckConstraint("amount >= 0", name="ck_budgets_amount_non_negative"),
        CheckConstraint("month BETWEEN 1 AND 12", name="ck_budgets_month_range"),
        CheckConstraint(f"year >= {MIN_BUDGET_YEAR}", name="ck_budgets_year_min"),
    )
