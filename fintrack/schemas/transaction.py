import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fintrack.models.enums import TransactionType
from fintrack.schemas.common import Money


class TransactionCreate(BaseModel):
    type: TransactionType
    category: int = Field(ge=1)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    description: str | None = Field(default=None, max_length=255)
    date: dt.date | None = None

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class TransactionUpdate(BaseModel):
    type: TransactionType | None = None
    category: int | None = Field(default=None, ge=1)
    amount: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    description: str | None = Field(default=None, max_length=255)
    date: dt.date | None = None

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class TransactionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: TransactionType
    amount: Money
    description: str | None
    category_id: int = Field(serialization_alias="categoryId")
    category_name: str = Field(serialization_alias="categoryName")
    date: dt.date
    created_at: dt.datetime | None = Field(default=None, serialization_alias="createdAt")


class TransactionResponse(BaseModel):
    message: str
    transaction: TransactionRead


class TransactionListResponse(BaseModel):
    message: str
    transactions: list[TransactionRead]
