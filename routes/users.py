# routes/users.py
from fastapi import APIRouter, Depends
import logging

from config import Settings, get_settings
from database import get_db
from models.user import LoginRequest, LoginResponse, UserCreate
from services import accounts
from .auth import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/register", status_code=201)
async def register(user: UserCreate, db=Depends(get_db)):
    logger.info(f"Registration attempt for username: {user.username}")
    await accounts.register(db, user.username, user.email, user.password)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, db=Depends(get_db), settings: Settings = Depends(get_settings)):
    logger.info(f"Login attempt for email: {request.email}")
    user = await accounts.authenticate(db, request.email, request.password)
    token = create_access_token(user, settings)
    return {
        "token": token,
        "user": {"id": user["id"], "username": user["username"], "email": user["email"]},
    }
