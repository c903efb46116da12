from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.db.session import get_session
from fintrack.db.settings import Settings, get_settings
from fintrack.services.colors import ColorAssigner
from fintrack.services.security import InvalidTokenError, decode_access_token
from fintrack.services.store import SqlTransactionStore, TransactionStore


def get_current_user_id(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> int:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token required")

    token = authorization.removeprefix("Bearer ").strip()
    try:
        return decode_access_token(token, settings)
    except InvalidTokenError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc


def get_transaction_store(session: AsyncSession = Depends(get_session)) -> TransactionStore:
    return SqlTransactionStore(session)


def get_color_assigner(settings: Settings = Depends(get_settings)) -> ColorAssigner:
    return ColorAssigner(settings.color_palette)
