"""Transaction API routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from spendwise.api.deps import DateRange, get_date_range, get_db, get_user_id, parse_identifier, resolve_user_id
from spendwise.config import settings
from spendwise.models.category import Category
from spendwise.schemas.common import ApiResponse, envelope
from spendwise.schemas.transaction import TransactionCreate, TransactionResponse, TransactionUpdate
from spendwise.services.transaction_service import TransactionService

router = APIRouter()


@router.get("", response_model=ApiResponse[list[TransactionResponse]], response_model_exclude_unset=True)
async def list_transactions(
    category: Category | None = None,
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    page: int = Query(1, ge=1),
    dates: DateRange = Depends(get_date_range),
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List transactions, newest first, with pagination and filters."""
    service = TransactionService(db)
    result = await service.list_transactions(
        user_id=user_id,
        page=page,
        limit=limit,
        category=category,
        date_from=dates.start,
        date_to=dates.end,
    )
    return envelope(result["data"], pagination=result["pagination"])


@router.post(
    "",
    response_model=ApiResponse[TransactionResponse],
    response_model_exclude_unset=True,
    status_code=201,
)
async def create_transaction(
    data: TransactionCreate,
    db: AsyncSession = Depends(get_db),
):
    """Record a new transaction."""
    service = TransactionService(db)
    transaction = await service.create_transaction(data, resolve_user_id(data.user_id))
    return envelope(transaction, message="Transaction created successfully")


@router.get("/{transaction_id}", response_model=ApiResponse[TransactionResponse], response_model_exclude_unset=True)
async def get_transaction(
    transaction_id: str,
    db: AsyncSession = Depends(get_db),
):
    service = TransactionService(db)
    transaction = await service.get_transaction(parse_identifier(transaction_id, "transaction"))
    return envelope(transaction)


@router.put("/{transaction_id}", response_model=ApiResponse[TransactionResponse], response_model_exclude_unset=True)
async def update_transaction(
    transaction_id: str,
    data: TransactionUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Edit any subset of amount, date, description and category."""
    service = TransactionService(db)
    transaction = await service.update_transaction(parse_identifier(transaction_id, "transaction"), data)
    return envelope(transaction, message="Transaction updated successfully")


@router.delete("/{transaction_id}", response_model=ApiResponse[None], response_model_exclude_unset=True)
async def delete_transaction(
    transaction_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Permanently delete a transaction."""
    service = TransactionService(db)
    await service.delete_transaction(parse_identifier(transaction_id, "transaction"))
    return envelope(message="Transaction deleted successfully")
