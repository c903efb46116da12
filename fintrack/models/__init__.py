from fintrack.models.category import Category
from fintrack.models.enums import TransactionType
from fintrack.models.transaction import Transaction
from fintrack.models.user import User

__all__ = [
    "Category",
    "Transaction",
    "TransactionType",
    "User",
]
