from pydantic import BaseModel, Field, field_validator

from fintrack.models.enums import TransactionType


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=64)
    type: TransactionType
    description: str | None = Field(default=None, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Category name cannot be empty")
        return stripped


class CategoryRead(BaseModel):
    id: int
    name: str
    type: TransactionType
    description: str | None = None


class CategoryResponse(BaseModel):
    message: str
    category: CategoryRead


class CategoryListResponse(BaseModel):
    message: str
    categories: list[CategoryRead]
