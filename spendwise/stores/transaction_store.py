"""Transaction persistence: CRUD, filtered listing and grouped reads."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from sqlalchemy import delete, extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from spendwise.models.category import Category
from spendwise.models.transaction import Transaction


def to_decimal(value) -> Decimal:
    """Normalize an aggregate result (Decimal, float, int or NULL) to Decimal."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class TransactionFilter:
    """Row selection shared by listing and aggregate reads.

    Date bounds are inclusive on both ends.
    """

    user_id: str
    category: Category | None = None
    date_from: date | None = None
    date_to: date | None = None

    def clauses(self) -> list:
        clauses = [Transaction.user_id == self.user_id]
        if self.category is not None:
            clauses.append(Transaction.category == self.category)
        if self.date_from is not None:
            clauses.append(Transaction.date >= self.date_from)
        if self.date_to is not None:
            clauses.append(Transaction.date <= self.date_to)
        return clauses


@dataclass(frozen=True)
class CategoryTotalRow:
    category: Category
    total: Decimal
    count: int


@dataclass(frozen=True)
class MonthTotalRow:
    year: int
    month: int
    total: Decimal
    count: int


# Newest first; same-day entries fall back to insertion order.
DEFAULT_ORDER = (Transaction.date.desc(), Transaction.created_at.desc(), Transaction.id.desc())


class TransactionStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self,
        user_id: str,
        amount: Decimal,
        date: date,
        description: str,
        category: Category,
    ) -> Transaction:
        transaction = Transaction(
            user_id=user_id,
            amount=amount,
            date=date,
            description=description,
            category=category,
        )
        self.db.add(transaction)
        await self.db.flush()
        await self.db.refresh(transaction)
        return transaction

    async def find_by_id(self, transaction_id: int) -> Transaction | None:
        return await self.db.get(Transaction, transaction_id)

    async def update_by_id(self, transaction_id: int, changes: dict) -> Transaction | None:
        """Apply a partial update in place. Returns None when the id is unknown."""
        transaction = await self.db.get(Transaction, transaction_id)
        if transaction is None:
            return None
        for key, value in changes.items():
            setattr(transaction, key, value)
        await self.db.flush()
        await self.db.refresh(transaction)
        return transaction

    async def delete_by_id(self, transaction_id: int) -> bool:
        result = await self.db.execute(
            delete(Transaction).where(Transaction.id == transaction_id)
        )
        return result.rowcount > 0

    async def query(
        self, filter: TransactionFilter, limit: int, skip: int = 0
    ) -> tuple[list[Transaction], int]:
        """Return one page of matching transactions and the total match count."""
        clauses = filter.clauses()

        count_query = select(func.count()).select_from(Transaction).where(*clauses)
        total = (await self.db.execute(count_query)).scalar_one()

        query = (
            select(Transaction)
            .where(*clauses)
            .order_by(*DEFAULT_ORDER)
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all()), total

    async def recent(self, user_id: str, limit: int) -> list[Transaction]:
        result = await self.db.execute(
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(*DEFAULT_ORDER)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def totals(self, filter: TransactionFilter) -> tuple[Decimal, int]:
        """Sum and count of matching transactions."""
        query = select(
            func.sum(Transaction.amount).label("total"),
            func.count(Transaction.id).label("count"),
        ).where(*filter.clauses())
        row = (await self.db.execute(query)).one()
        return to_decimal(row.total), row.count or 0

    async def aggregate_by_category(self, filter: TransactionFilter) -> list[CategoryTotalRow]:
        """Sum and count per category, highest total first."""
        total_col = func.sum(Transaction.amount).label("total")
        query = (
            select(
                Transaction.category,
                total_col,
                func.count(Transaction.id).label("count"),
            )
            .where(*filter.clauses())
            .group_by(Transaction.category)
            .order_by(total_col.desc())
        )
        result = await self.db.execute(query)
        return [
            CategoryTotalRow(category=Category(row.category), total=to_decimal(row.total), count=row.count)
            for row in result.all()
        ]

    async def aggregate_by_month(self, filter: TransactionFilter) -> list[MonthTotalRow]:
        """Sum and count per (year, calendar month) bucket, oldest first."""
        year_col = extract("year", Transaction.date)
        month_col = extract("month", Transaction.date)
        query = (
            select(
                year_col.label("year"),
                month_col.label("month"),
                func.sum(Transaction.amount).label("total"),
                func.count(Transaction.id).label("count"),
            )
            .where(*filter.clauses())
            .group_by(year_col, month_col)
            .order_by(year_col, month_col)
        )
        result = await self.db.execute(query)
        return [
            MonthTotalRow(
                year=int(row.year),
                month=int(row.month),
                total=to_decimal(row.total),
                count=row.count,
            )
            for row in result.all()
        ]
