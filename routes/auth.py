# routes/auth.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
import logging

from config import Settings, get_settings
from database import get_db
from errors import AuthenticationError
from models.user import UserResponse
from services.accounts import get_user_by_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/login", auto_error=False)


def create_access_token(user: dict, settings: Settings) -> str:
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {"id": user["id"], "username": user["username"], "exp": expires}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


async def resolve_token(token: str, db, settings: Settings) -> dict:
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.warning(f"Rejected token: {e}")
        raise AuthenticationError("Invalid token")

    user_id = payload.get("id")
    if not user_id:
        logger.error("Invalid token: missing user id")
        raise AuthenticationError("Invalid token")

    user = await get_user_by_id(db, user_id)
    if not user:
        logger.warning(f"User not found for id: {user_id}")
        raise AuthenticationError("User not found")
    return user


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db=Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> dict:
    if not token:
        raise AuthenticationError("Not authenticated")
    return await resolve_token(token, db, settings)


async def get_optional_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db=Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Optional[dict]:
    """Like get_current_user, but anonymous requests get None. A bad token is still rejected."""
    if not token:
        return None
    return await resolve_token(token, db, settings)


@router.get("/current-user", response_model=UserResponse)
async def get_current_user_endpoint(current_user: dict = Depends(get_current_user)):
    return current_user
