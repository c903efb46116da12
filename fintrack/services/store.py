from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fintrack.models.enums import TransactionType
from fintrack.models.transaction import Transaction
from fintrack.services.errors import UpstreamFetchError
from fintrack.services.filters import TransactionFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CategoryRef:
    id: int
    name: str
    type: TransactionType


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    id: int
    owner_id: int
    type: TransactionType
    amount: Decimal
    tx_date: dt.date
    category_id: int
    category: CategoryRef | None = None
    description: str | None = None
    created_at: dt.datetime | None = None


class TransactionStore(Protocol):
    async def fetch_transactions(self, query: TransactionFilter) -> list[TransactionRecord]: ...


def to_record(transaction: Transaction) -> TransactionRecord:
    category = transaction.category
    return TransactionRecord(
        id=transaction.id,
        owner_id=transaction.user_id,
        type=transaction.type,
        amount=transaction.amount,
        tx_date=transaction.tx_date,
        category_id=transaction.category_id,
        category=CategoryRef(id=category.id, name=category.name, type=category.type) if category else None,
        description=transaction.description,
        created_at=transaction.created_at,
    )


class SqlTransactionStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def fetch_transactions(self, query: TransactionFilter) -> list[TransactionRecord]:
        filters = [Transaction.user_id == query.owner_id]
        if query.date_range is not None:
            filters.append(Transaction.tx_date >= query.date_range.start)
            filters.append(Transaction.tx_date < query.date_range.end)
        if query.type is not None:
            filters.append(Transaction.type == query.type)
        if query.category_id is not None:
            filters.append(Transaction.category_id == query.category_id)

        if query.oldest_first:
            ordering = (Transaction.tx_date.asc(), Transaction.id.asc())
        else:
            ordering = (Transaction.tx_date.desc(), Transaction.id.desc())

        try:
            rows = await self.session.scalars(
                select(Transaction)
                .options(selectinload(Transaction.category))
                .where(*filters)
                .order_by(*ordering)
            )
            transactions = rows.all()
        except SQLAlchemyError as exc:
            logger.exception("Transaction fetch failed for user %s", query.owner_id)
            raise UpstreamFetchError(str(exc)) from exc

        return [to_record(item) for item in transactions]
