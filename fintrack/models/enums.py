from enum import Enum

from sqlalchemy import Enum as SAEnum


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


transaction_type_enum = SAEnum(
    TransactionType,
    name="transaction_type",
    values_callable=lambda enum_cls: [item.value for item in enum_cls],
)
