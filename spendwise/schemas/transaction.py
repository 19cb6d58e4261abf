"""Transaction schemas for request/response validation."""

import datetime as dt
from decimal import Decimal
from typing import Annotated

from pydantic import Field, StringConstraints, field_validator

from spendwise.models.base import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS, USER_ID_MAX_LENGTH
from spendwise.models.category import Category
from spendwise.models.transaction import DESCRIPTION_MAX_LENGTH
from spendwise.schemas.common import CamelModel, Money

Description = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=DESCRIPTION_MAX_LENGTH),
]

# Strictly positive and representable in the NUMERIC(12, 2) column.
PositiveAmount = Annotated[
    Decimal,
    Field(gt=0, max_digits=AMOUNT_MAX_DIGITS, decimal_places=AMOUNT_DECIMAL_PLACES),
]


class TransactionCreate(CamelModel):
    amount: PositiveAmount
    date: dt.date
    description: Description
    category: Category
    # falls back to the configured default user
    user_id: str | None = Field(default=None, max_length=USER_ID_MAX_LENGTH)


class TransactionUpdate(CamelModel):
    """Partial edit: only the fields present in the body are changed.

    A field sent as ``null`` is rejected; omit it to leave it unchanged.
    """

    amount: PositiveAmount | None = None
    date: dt.date | None = None
    description: Description | None = None
    category: Category | None = None

    @field_validator("amount", "date", "description", "category", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be null")
        return value

    def changes(self) -> dict:
        """Fields explicitly sent in the body."""
        return self.model_dump(exclude_unset=True)


class TransactionResponse(CamelModel):
    id: int
    amount: Money
    date: dt.date
    description: str
    category: Category
    user_id: str
    created_at: dt.datetime
    updated_at: dt.datetime
