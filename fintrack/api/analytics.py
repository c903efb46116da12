from fastapi import APIRouter, Depends, Query

from fintrack.api.deps import get_color_assigner, get_current_user_id, get_transaction_store
from fintrack.schemas.analytics import AnalyticsReportRead, AnalyticsResponse
from fintrack.schemas.common import ErrorResponse
from fintrack.services.analytics import generate_analytics
from fintrack.services.colors import ColorAssigner
from fintrack.services.store import TransactionStore

router = APIRouter(prefix="/api/transactions", tags=["analytics"])


@router.get(
    "/analytics",
    response_model=AnalyticsResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing year or unknown month"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        500: {"model": ErrorResponse, "description": "Transactions could not be fetched"},
    },
)
async def get_analytics(
    year: str | None = Query(default=None, description="Calendar year, e.g. 2024"),
    month: str | None = Query(default=None, description="English month name, e.g. March"),
    user_id: int = Depends(get_current_user_id),
    store: TransactionStore = Depends(get_transaction_store),
    colors: ColorAssigner = Depends(get_color_assigner),
) -> AnalyticsResponse:
    report = await generate_analytics(store, user_id, year, month, colors)
    return AnalyticsResponse(
        message="Analytics fetched successfully",
        analytics=AnalyticsReportRead.model_validate(report),
    )
