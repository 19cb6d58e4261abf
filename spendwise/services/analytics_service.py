"""Analytics service: category breakdowns, monthly trends, dashboard, insights."""

from datetime import date
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from spendwise.config import settings
from spendwise.schemas.analytics import CategoryBreakdown, DashboardSummary, Insight, MonthlyExpense
from spendwise.services.aggregation import (
    build_category_breakdown,
    build_category_totals,
    build_insights,
    build_monthly_expenses,
    pick_top_category,
)
from spendwise.stores.budget_store import BudgetStore
from spendwise.stores.transaction_store import TransactionFilter, TransactionStore
from spendwise.utils.dates import month_bounds, shift_months


class AnalyticsService:
    """Read-only views computed from the transaction and budget stores.

    Methods that depend on "now" accept an optional ``today`` so the reporting
    period can be pinned.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.transactions = TransactionStore(db)
        self.budgets = BudgetStore(db)

    async def category_breakdown(
        self,
        user_id: str,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> tuple[list[CategoryBreakdown], Decimal]:
        """Per-category totals over an optional date range, plus the grand total."""
        filter = TransactionFilter(user_id=user_id, date_from=date_from, date_to=date_to)
        rows = await self.transactions.aggregate_by_category(filter)
        return build_category_breakdown(rows)

    async def monthly_expenses(
        self,
        user_id: str,
        months_back: int,
        today: date | None = None,
    ) -> list[MonthlyExpense]:
        """Spending per calendar month over ``[today - months_back months, today]``."""
        today = today or date.today()
        filter = TransactionFilter(
            user_id=user_id,
            date_from=shift_months(today, -months_back),
            date_to=today,
        )
        rows = await self.transactions.aggregate_by_month(filter)
        return build_monthly_expenses(rows)

    async def dashboard_summary(self, user_id: str, today: date | None = None) -> DashboardSummary:
        today = today or date.today()
        start, end = month_bounds(today.year, today.month)
        month_filter = TransactionFilter(user_id=user_id, date_from=start, date_to=end)

        total_expenses, count = await self.transactions.totals(month_filter)
        total_budget = await self.budgets.total_for_month(user_id, today.month, today.year)
        category_totals = build_category_totals(
            await self.transactions.aggregate_by_category(month_filter)
        )
        # Latest entries overall, not limited to the current month.
        recent = await self.transactions.recent(user_id, limit=settings.recent_transactions_limit)

        return DashboardSummary(
            total_expenses=total_expenses,
            transaction_count=count,
            total_budget=total_budget,
            top_category=pick_top_category(category_totals),
            recent_transactions=recent,
            category_totals=category_totals,
            month=today.month,
            year=today.year,
        )

    async def budget_insights(self, user_id: str, today: date | None = None) -> list[Insight]:
        """Budget vs. actual for every budget set in the current month."""
        today = today or date.today()
        start, end = month_bounds(today.year, today.month)
        budgets = await self.budgets.query_by_month(user_id, today.month, today.year)
        breakdown, _ = await self.category_breakdown(user_id, date_from=start, date_to=end)
        return build_insights(budgets, breakdown)
