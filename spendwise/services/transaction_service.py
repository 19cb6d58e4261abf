"""Transaction management service."""

from datetime import date
from math import ceil

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from spendwise.core.exceptions import NotFoundError
from spendwise.models.category import Category
from spendwise.models.transaction import Transaction
from spendwise.schemas.transaction import TransactionCreate, TransactionUpdate
from spendwise.stores.transaction_store import TransactionFilter, TransactionStore

logger = structlog.get_logger()


class TransactionService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.store = TransactionStore(db)

    async def list_transactions(
        self,
        user_id: str,
        page: int = 1,
        limit: int = 100,
        category: Category | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> dict:
        """List transactions newest first, one page at a time."""
        filter = TransactionFilter(
            user_id=user_id,
            category=category,
            date_from=date_from,
            date_to=date_to,
        )
        items, total = await self.store.query(filter, limit=limit, skip=(page - 1) * limit)
        return {
            "data": items,
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "pages": ceil(total / limit) if limit else 0,
            },
        }

    async def create_transaction(self, data: TransactionCreate, user_id: str) -> Transaction:
        transaction = await self.store.insert(
            user_id=user_id,
            amount=data.amount,
            date=data.date,
            description=data.description,
            category=data.category,
        )
        logger.info(
            "transaction_created",
            transaction_id=transaction.id,
            user_id=user_id,
            category=transaction.category.value,
        )
        return transaction

    async def get_transaction(self, transaction_id: int) -> Transaction:
        transaction = await self.store.find_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction")
        return transaction

    async def update_transaction(self, transaction_id: int, data: TransactionUpdate) -> Transaction:
        changes = data.changes()
        transaction = await self.store.update_by_id(transaction_id, changes)
        if transaction is None:
            raise NotFoundError("Transaction")
        logger.info("transaction_updated", transaction_id=transaction_id, fields=sorted(changes))
        return transaction

    async def delete_transaction(self, transaction_id: int) -> None:
        deleted = await self.store.delete_by_id(transaction_id)
        if not deleted:
            raise NotFoundError("Transaction")
        logger.info("transaction_deleted", transaction_id=transaction_id)
