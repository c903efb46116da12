import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.api.deps import get_current_user_id
from fintrack.db.session import get_session
from fintrack.models.category import Category
from fintrack.models.enums import TransactionType
from fintrack.schemas.category import CategoryCreate, CategoryListResponse, CategoryResponse
from fintrack.services.transactions import serialize_category

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/transactions", tags=["categories"])


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CategoryCreate,
    _: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
) -> CategoryResponse:
    existing = await session.scalar(select(Category).where(Category.name == payload.name))
    if existing is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Category already exists")

    category = Category(name=payload.name, type=payload.type, description=payload.description)
    session.add(category)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Category already exists") from exc

    logger.info("Created %s category %r", category.type.value, category.name)
    return CategoryResponse(message="Category created successfully", category=serialize_category(category))


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(
    type: TransactionType | None = Query(default=None),
    _: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
) -> CategoryListResponse:
    query = select(Category).order_by(Category.name.asc())
    if type is not None:
        query = query.where(Category.type == type)

    rows = await session.scalars(query)
    return CategoryListResponse(
        message="Categories fetched successfully",
        categories=[serialize_category(item) for item in rows.all()],
    )
