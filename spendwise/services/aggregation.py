"""Pure reductions from grouped store rows to analytics views.

Nothing here touches the database: every function takes rows already fetched
by the stores and returns schema objects, so the arithmetic (sums, shares,
rounding, insight status) can be reasoned about and tested in isolation.
"""

from decimal import ROUND_HALF_UP, Decimal

from spendwise.models.budget import Budget
from spendwise.schemas.analytics import (
    CategoryBreakdown,
    CategoryTotal,
    Insight,
    InsightStatus,
    MonthlyExpense,
)
from spendwise.stores.transaction_store import CategoryTotalRow, MonthTotalRow
from spendwise.utils.dates import month_name

CENT = Decimal("0.01")
HUNDRED = Decimal("100")
ZERO = Decimal("0")

# Spending below this share of the budget counts as "under".
UNDER_BUDGET_RATIO = Decimal("0.8")


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def build_category_breakdown(rows: list[CategoryTotalRow]) -> tuple[list[CategoryBreakdown], Decimal]:
    """Return per-category entries (largest first) and the grand total."""
    ordered = sorted(rows, key=lambda r: r.total, reverse=True)
    grand_total = sum((r.total for r in ordered), ZERO)

    entries = []
    for row in ordered:
        avg = row.total / row.count if row.count else ZERO
        share = row.total / grand_total * HUNDRED if grand_total > 0 else ZERO
        entries.append(
            CategoryBreakdown(
                category=row.category,
                total_amount=row.total,
                transaction_count=row.count,
                avg_amount=round_money(avg),
                percentage=round_money(share),
            )
        )
    return entries, grand_total


def build_monthly_expenses(rows: list[MonthTotalRow]) -> list[MonthlyExpense]:
    return [
        MonthlyExpense(
            year=row.year,
            month=row.month,
            month_name=month_name(row.month),
            total_expenses=row.total,
            transaction_count=row.count,
        )
        for row in sorted(rows, key=lambda r: (r.year, r.month))
    ]


def build_category_totals(rows: list[CategoryTotalRow]) -> list[CategoryTotal]:
    return [
        CategoryTotal(category=row.category, amount=row.total)
        for row in sorted(rows, key=lambda r: r.total, reverse=True)
    ]


def pick_top_category(totals: list[CategoryTotal]) -> CategoryTotal | None:
    """Highest-spending category, or None when nothing was spent.

    Equal totals keep the order the store returned them in, which is not
    guaranteed to be stable between calls.
    """
    return totals[0] if totals else None


def insight_status(budget: Decimal, actual: Decimal) -> InsightStatus:
    difference = actual - budget
    if difference > 0:
        return "over"
    if actual < budget * UNDER_BUDGET_RATIO:
        return "under"
    return "good"


def build_insights(budgets: list[Budget], breakdown: list[CategoryBreakdown]) -> list[Insight]:
    """Compare each budget with the actual spend of its category.

    A budgeted category without transactions yields actual = 0.
    """
    actual_by_category = {entry.category: entry.total_amount for entry in breakdown}

    insights = []
    for budget in budgets:
        limit = budget.amount
        actual = actual_by_category.get(budget.category, ZERO)
        percentage = actual / limit * HUNDRED if limit > 0 else ZERO
        insights.append(
            Insight(
                category=budget.category,
                budget=limit,
                actual=actual,
                difference=actual - limit,
                percentage=round_money(percentage),
                status=insight_status(limit, actual),
            )
        )
    return insights
