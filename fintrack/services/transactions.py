from fintrack.models.category import Category
from fintrack.models.user import User
from fintrack.schemas.auth import UserRead
from fintrack.schemas.category import CategoryRead
from fintrack.schemas.transaction import TransactionRead
from fintrack.services.store import TransactionRecord


def serialize_transaction(record: TransactionRecord) -> TransactionRead:
    category_name = record.category.name if record.category else "Other"
    return TransactionRead(
        id=record.id,
        type=record.type,
        amount=record.amount,
        description=record.description,
        category_id=record.category_id,
        category_name=category_name,
        date=record.tx_date,
        created_at=record.created_at,
    )


def serialize_category(category: Category) -> CategoryRead:
    return CategoryRead(
        id=category.id,
        name=category.name,
        type=category.type,
        description=category.description,
    )


def serialize_user(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        username=user.username,
        email=user.email,
        profile_image=user.profile_image,
        created_at=user.created_at,
    )
