"""Budget schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import Field

from spendwise.models.base import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS, USER_ID_MAX_LENGTH
from spendwise.models.budget import MIN_BUDGET_YEAR
from spendwise.models.category import Category
from spendwise.schemas.common import CamelModel, Money

BudgetAmount = Annotated[
    Decimal,
    Field(ge=0, max_digits=AMOUNT_MAX_DIGITS, decimal_places=AMOUNT_DECIMAL_PLACES),
]


class BudgetUpsert(CamelModel):
    category: Category
    amount: BudgetAmount
    user_id: str | None = Field(default=None, max_length=USER_ID_MAX_LENGTH)
    month: int | None = Field(default=None, ge=1, le=12)  # defaults to the current month
    year: int | None = Field(default=None, ge=MIN_BUDGET_YEAR)  # defaults to the current year


class BudgetAmountUpdate(CamelModel):
    amount: BudgetAmount


class BudgetResponse(CamelModel):
    id: int
    category: Category
    amount: Money
    user_id: str
    month: int
    year: int
    created_at: datetime
    updated_at: datetime
