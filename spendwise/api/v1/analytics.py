"""Analytics API routes: dashboard, monthly trend, category breakdown, insights."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from spendwise.api.deps import DateRange, get_date_range, get_db, get_user_id
from spendwise.config import settings
from spendwise.schemas.analytics import (
    CategoryBreakdownResponse,
    DashboardSummary,
    Insight,
    MonthlyExpense,
)
from spendwise.schemas.common import ApiResponse, envelope
from spendwise.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get("/dashboard", response_model=ApiResponse[DashboardSummary], response_model_exclude_unset=True)
async def dashboard(
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Current-month totals, budget total, top category and latest transactions."""
    service = AnalyticsService(db)
    return envelope(await service.dashboard_summary(user_id))


@router.get(
    "/monthly-expenses",
    response_model=ApiResponse[list[MonthlyExpense]],
    response_model_exclude_unset=True,
)
async def monthly_expenses(
    months: int = Query(settings.default_trend_months, ge=1, le=120),
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Spending per calendar month over the last ``months`` months."""
    service = AnalyticsService(db)
    return envelope(await service.monthly_expenses(user_id, months_back=months))


@router.get("/category-breakdown", response_model=CategoryBreakdownResponse, response_model_exclude_unset=True)
async def category_breakdown(
    dates: DateRange = Depends(get_date_range),
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Totals, counts, averages and shares per category.

    Returns ``{success, data: [...], total}`` where ``total`` is the sum over
    all categories in the range.
    """
    service = AnalyticsService(db)
    entries, total = await service.category_breakdown(user_id, date_from=dates.start, date_to=dates.end)
    return envelope(entries, total=total)


@router.get("/insights", response_model=ApiResponse[list[Insight]], response_model_exclude_unset=True)
async def insights(
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Budget vs. actual spending for each budget of the current month."""
    service = AnalyticsService(db)
    return envelope(await service.budget_insights(user_id))
