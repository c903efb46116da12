import datetime as dt

from pydantic import BaseModel, EmailStr, Field, field_validator


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()


class UserRead(BaseModel):
    id: int
    username: str
    email: str
    profile_image: str | None = Field(default=None, serialization_alias="profileImage")
    created_at: dt.datetime | None = Field(default=None, serialization_alias="createdAt")


class AuthResponse(BaseModel):
    message: str
    user: UserRead
    token: str
