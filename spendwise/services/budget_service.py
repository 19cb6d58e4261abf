"""Budget management service."""

from datetime import date

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from spendwise.core.exceptions import NotFoundError
from spendwise.models.budget import Budget
from spendwise.schemas.budget import BudgetAmountUpdate, BudgetUpsert
from spendwise.stores.budget_store import BudgetStore

logger = structlog.get_logger()


class BudgetService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.store = BudgetStore(db)

    async def list_budgets(
        self,
        user_id: str,
        month: int | None = None,
        year: int | None = None,
        today: date | None = None,
    ) -> list[Budget]:
        """List a month's budgets (current month by default), sorted by category."""
        today = today or date.today()
        return await self.store.query_by_month(
            user_id,
            month=month or today.month,
            year=year or today.year,
        )

    async def save_budget(self, data: BudgetUpsert, user_id: str, today: date | None = None) -> Budget:
        """Create or replace the budget for (user, category, month, year)."""
        today = today or date.today()
        budget = await self.store.upsert(
            user_id=user_id,
            category=data.category,
            month=data.month or today.month,
            year=data.year or today.year,
            amount=data.amount,
        )
        logger.info(
            "budget_saved",
            budget_id=budget.id,
            user_id=user_id,
            category=budget.category.value,
            month=budget.month,
            year=budget.year,
        )
        return budget

    async def update_amount(self, budget_id: int, data: BudgetAmountUpdate) -> Budget:
        budget = await self.store.update_amount_by_id(budget_id, data.amount)
        if budget is None:
            raise NotFoundError("Budget")
        logger.info("budget_updated", budget_id=budget_id)
        return budget

    async def delete_budget(self, budget_id: int) -> None:
        deleted = await self.store.delete_by_id(budget_id)
        if not deleted:
            raise NotFoundError("Budget")
        logger.info("budget_deleted", budget_id=budget_id)
