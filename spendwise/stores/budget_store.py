"""Budget persistence keyed on (user, category, month, year)."""

from decimal import Decimal

from sqlalchemy import delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from spendwise.core.exceptions import InvalidAmountError, InvalidCategoryError
from spendwise.models.budget import BUDGET_PERIOD_KEY, Budget
from spendwise.models.category import Category
from spendwise.stores.transaction_store import to_decimal

# Dialects offering INSERT ... ON CONFLICT DO UPDATE.
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _check_amount(amount: Decimal) -> None:
    if amount < 0:
        raise InvalidAmountError("Budget amount cannot be negative")


def _check_category(category) -> Category:
    try:
        return Category(category)
    except ValueError:
        raise InvalidCategoryError() from None


class BudgetStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def upsert(
        self,
        user_id: str,
        category: Category | str,
        month: int,
        year: int,
        amount: Decimal,
    ) -> Budget:
        """Create the budget for this period, or replace the amount of the existing one.

        Runs as a single ``INSERT ... ON CONFLICT DO UPDATE`` against the
        uniqueness constraint, so concurrent upserts of the same period leave
        exactly one row carrying the last committed amount.
        """
        category = _check_category(category)
        _check_amount(amount)

        dialect = self.db.get_bind().dialect.name
        try:
            insert = _UPSERT_INSERTS[dialect]
        except KeyError:
            raise NotImplementedError(f"Budget upsert is not supported on {dialect}") from None

        stmt = insert(Budget).values(
            user_id=user_id,
            category=category,
            month=month,
            year=year,
            amount=amount,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=list(BUDGET_PERIOD_KEY),
            set_={"amount": stmt.excluded.amount, "updated_at": func.now()},
        ).returning(Budget.id)

        budget_id = (await self.db.execute(stmt)).scalar_one()
        return await self.db.get(Budget, budget_id, populate_existing=True)

    async def find_by_id(self, budget_id: int) -> Budget | None:
        return await self.db.get(Budget, budget_id)

    async def update_amount_by_id(self, budget_id: int, amount: Decimal) -> Budget | None:
        _check_amount(amount)
        budget = await self.db.get(Budget, budget_id)
        if budget is None:
            return None
        budget.amount = amount
        await self.db.flush()
        await self.db.refresh(budget)
        return budget

    async def delete_by_id(self, budget_id: int) -> bool:
        result = await self.db.execute(delete(Budget).where(Budget.id == budget_id))
        return result.rowcount > 0

    async def query_by_month(self, user_id: str, month: int, year: int) -> list[Budget]:
        result = await self.db.execute(
            select(Budget)
            .where(Budget.user_id == user_id, Budget.month == month, Budget.year == year)
            .order_by(Budget.category.asc())
        )
        return list(result.scalars().all())

    async def total_for_month(self, user_id: str, month: int, year: int) -> Decimal:
        result = await self.db.execute(
            select(func.sum(Budget.amount)).where(
                Budget.user_id == user_id, Budget.month == month, Budget.year == year
            )
        )
        return to_decimal(result.scalar())
