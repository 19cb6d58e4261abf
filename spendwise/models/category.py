"""Spending categories shared by transactions and budgets."""

from enum import Enum

from sqlalchemy import Enum as SAEnum


class Category(str, Enum):
    """Closed set of spending categories.

    Anything outside this set is rejected by request validation, before a
    store operation is attempted.
    """

    FOOD = "Food"
    TRANSPORT = "Transport"
    ENTERTAINMENT = "Entertainment"
    HOUSING = "Housing"
    HEALTHCARE = "Healthcare"
    SHOPPING = "Shopping"
    UTILITIES = "Utilities"


def category_column_type() -> SAEnum:
    """Column type storing the enum *value* ("Food") in a bounded VARCHAR."""
    return SAEnum(
        Category,
        name="category",
        native_enum=False,
        create_constraint=False,
        length=20,
        values_callable=lambda enum_cls: [member.value for member in enum_cls],
        validate_strings=True,
    )
