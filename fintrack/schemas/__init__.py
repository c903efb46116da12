from fintrack.schemas.analytics import AnalyticsReportRead, AnalyticsResponse, CategoryBreakdownRead
from fintrack.schemas.auth import AuthResponse, LoginRequest, UserRead
from fintrack.schemas.category import CategoryCreate, CategoryListResponse, CategoryRead, CategoryResponse
from fintrack.schemas.common import ErrorResponse, MessageResponse, Money
from fintrack.schemas.transaction import (
    TransactionCreate,
    TransactionListResponse,
    TransactionRead,
    TransactionResponse,
    TransactionUpdate,
)

__all__ = [
    "AnalyticsReportRead",
    "AnalyticsResponse",
    "AuthResponse",
    "CategoryBreakdownRead",
    "CategoryCreate",
    "CategoryListResponse",
    "CategoryRead",
    "CategoryResponse",
    "ErrorResponse",
    "LoginRequest",
    "MessageResponse",
    "Money",
    "TransactionCreate",
    "TransactionListResponse",
    "TransactionRead",
    "TransactionResponse",
    "TransactionUpdate",
]
