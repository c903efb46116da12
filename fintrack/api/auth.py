import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.db.session import get_session
from fintrack.db.settings import Settings, get_settings
from fintrack.models.user import User
from fintrack.schemas.auth import AuthResponse, LoginRequest
from fintrack.services.security import create_access_token, hash_password, verify_password
from fintrack.services.transactions import serialize_user
from fintrack.services.uploads import UploadError, save_profile_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

email_adapter = TypeAdapter(EmailStr)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    username: str | None = Form(default=None),
    email: str | None = Form(default=None),
    password: str | None = Form(default=None),
    profile_image: UploadFile | None = File(default=None, alias="profileImage"),
    session: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> AuthResponse:
    if not username or not username.strip() or not email or not password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="All fields are required")

    try:
        normalized_email = email_adapter.validate_python(email.strip()).lower()
    except PydanticValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email address") from exc

    existing = await session.scalar(select(User).where(User.email == normalized_email))
    if existing is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    image_path = None
    if profile_image is not None and profile_image.filename:
        try:
            image_path = await save_profile_image(profile_image, settings.upload_dir)
        except UploadError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"File upload error: {exc}") from exc

    user = User(
        username=username.strip(),
        email=normalized_email,
        password_hash=hash_password(password),
        profile_image=image_path,
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered") from exc
    await session.refresh(user)

    logger.info("Registered user %s", user.id)
    return AuthResponse(
        message="User registered successfully",
        user=serialize_user(user),
        token=create_access_token(user.id, settings),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> AuthResponse:
    user = await session.scalar(select(User).where(User.email == payload.email))
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.warning("Rejected login for %s", payload.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    logger.info("User %s logged in", user.id)
    return AuthResponse(
        message="Login successful",
        user=serialize_user(user),
        token=create_access_token(user.id, settings),
    )
