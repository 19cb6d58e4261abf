"""Analytics schemas."""

from decimal import Decimal
from typing import Literal

from spendwise.models.category import Category
from spendwise.schemas.common import ApiResponse, CamelModel, Money
from spendwise.schemas.transaction import TransactionResponse

InsightStatus = Literal["over", "under", "good"]


class CategoryBreakdown(CamelModel):
    category: Category
    total_amount: Money
    transaction_count: int
    avg_amount: Money
    percentage: Money


class CategoryBreakdownResponse(ApiResponse[list[CategoryBreakdown]]):
    total: Money = Decimal("0")


class MonthlyExpense(CamelModel):
    year: int
    month: int
    month_name: str
    total_expenses: Money
    transaction_count: int


class CategoryTotal(CamelModel):
    category: Category
    amount: Money


class DashboardSummary(CamelModel):
    total_expenses: Money
    transaction_count: int
    total_budget: Money
    top_category: CategoryTotal | None
    recent_transactions: list[TransactionResponse]
    category_totals: list[CategoryTotal]
    month: int
    year: int


class Insight(CamelModel):
    category: Category
    budget: Money
    actual: Money
    difference: Money
    percentage: Money
    status: InsightStatus
