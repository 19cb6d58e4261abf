"""Budget API routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from spendwise.api.deps import get_db, get_user_id, parse_identifier, resolve_user_id
from spendwise.models.budget import MIN_BUDGET_YEAR
from spendwise.schemas.budget import BudgetAmountUpdate, BudgetResponse, BudgetUpsert
from spendwise.schemas.common import ApiResponse, envelope
from spendwise.services.budget_service import BudgetService

router = APIRouter()


@router.get("", response_model=ApiResponse[list[BudgetResponse]], response_model_exclude_unset=True)
async def list_budgets(
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None, ge=MIN_BUDGET_YEAR),
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List budgets for a month (current month/year by default), sorted by category."""
    service = BudgetService(db)
    return envelope(await service.list_budgets(user_id, month=month, year=year))


@router.post("", response_model=ApiResponse[BudgetResponse], response_model_exclude_unset=True, status_code=201)
async def save_budget(
    data: BudgetUpsert,
    db: AsyncSession = Depends(get_db),
):
    """Create the budget for a category and month, or replace its amount."""
    service = BudgetService(db)
    budget = await service.save_budget(data, resolve_user_id(data.user_id))
    return envelope(budget, message="Budget saved successfully")


@router.put("/{budget_id}", response_model=ApiResponse[BudgetResponse], response_model_exclude_unset=True)
async def update_budget(
    budget_id: str,
    data: BudgetAmountUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Change the amount of an existing budget."""
    service = BudgetService(db)
    budget = await service.update_amount(parse_identifier(budget_id, "budget"), data)
    return envelope(budget, message="Budget updated successfully")


@router.delete("/{budget_id}", response_model=ApiResponse[None], response_model_exclude_unset=True)
async def delete_budget(
    budget_id: str,
    db: AsyncSession = Depends(get_db),
):
    service = BudgetService(db)
    await service.delete_budget(parse_identifier(budget_id, "budget"))
    return envelope(message="Budget deleted successfully")
