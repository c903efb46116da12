import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fintrack.api.deps import get_current_user_id, get_transaction_store
from fintrack.db.session import get_session
from fintrack.models.category import Category
from fintrack.models.enums import TransactionType
from fintrack.models.transaction import Transaction
from fintrack.schemas.common import MessageResponse
from fintrack.schemas.transaction import (
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
    TransactionUpdate,
)
from fintrack.services.filters import DateRange, build_transaction_filter
from fintrack.services.store import TransactionStore, to_record
from fintrack.services.transactions import serialize_transaction

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


async def _get_category(session: AsyncSession, category_id: int, tx_type: TransactionType) -> Category:
    category = await session.get(Category, category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    if category.type != tx_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category type mismatch with transaction type",
        )
    return category


async def _get_owned_transaction(session: AsyncSession, transaction_id: int, user_id: int) -> Transaction:
    transaction = await session.scalar(
        select(Transaction)
        .options(selectinload(Transaction.category))
        .where(Transaction.id == transaction_id, Transaction.user_id == user_id)
    )
    if transaction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return transaction


@router.post("/transactions", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    payload: TransactionCreate,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
) -> TransactionResponse:
    category = await _get_category(session, payload.category, payload.type)

    transaction = Transaction(
        user_id=user_id,
        type=payload.type,
        category_id=category.id,
        amount=payload.amount,
        description=payload.description,
        tx_date=payload.date or dt.date.today(),
    )
    session.add(transaction)
    await session.commit()

    saved_transaction = await _get_owned_transaction(session, transaction.id, user_id)
    return TransactionResponse(
        message="Transaction created successfully",
        transaction=serialize_transaction(to_record(saved_transaction)),
    )


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(
    type: TransactionType | None = Query(default=None),
    category: int | None = Query(default=None, ge=1),
    start: dt.date | None = Query(default=None),
    end: dt.date | None = Query(default=None),
    user_id: int = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_transaction_store),
) -> TransactionListResponse:
    date_range = DateRange.inclusive(start, end) if start is not None and end is not None else None
    query = build_transaction_filter(user_id, date_range=date_range, type=type, category_id=category)

    records = await store.fetch_transactions(query)
    return TransactionListResponse(
        message="Transactions fetched successfully",
        transactions=[serialize_transaction(record) for record in records],
    )


@router.put("/transactions/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: int,
    payload: TransactionUpdate,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
) -> TransactionResponse:
    transaction = await _get_owned_transaction(session, transaction_id, user_id)

    tx_type = payload.type or transaction.type
    if payload.category is not None:
        transaction.category = await _get_category(session, payload.category, tx_type)
        transaction.category_id = payload.category
    elif payload.type is not None and transaction.category is not None and transaction.category.type != tx_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category type mismatch with transaction type",
        )

    transaction.type = tx_type
    if payload.amount is not None:
        transaction.amount = payload.amount
    if "description" in payload.model_fields_set:
        transaction.description = payload.description
    if payload.date is not None:
        transaction.tx_date = payload.date

    await session.commit()

    return TransactionResponse(
        message="Transaction updated successfully",
        transaction=serialize_transaction(to_record(transaction)),
    )


@router.delete("/transactions/{transaction_id}", response_model=MessageResponse)
async def delete_transaction(
    transaction_id: int,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
) -> MessageResponse:
    transaction = await _get_owned_transaction(session, transaction_id, user_id)

    await session.delete(transaction)
    await session.commit()
    return MessageResponse(message="Transaction deleted successfully")
