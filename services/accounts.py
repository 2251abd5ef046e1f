# services/accounts.py
import logging
import uuid
from datetime import datetime, timezone

from bcrypt import checkpw, gensalt, hashpw
from pymongo.errors import DuplicateKeyError

from errors import ConflictError, InvalidCredentialsError, ValidationError

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes and rejects longer input
MAX_PASSWORD_BYTES = 72


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def register(db, username: str, email: str, password: str) -> dict:
    username = username.strip()
    email = normalize_email(email)
    problems = []
    if not username:
        problems.append({"loc": "username", "msg": "Username is required"})
    if not email:
        problems.append({"loc": "email", "msg": "Email is required"})
    if not password:
        problems.append({"loc": "password", "msg": "Password is required"})
    elif len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        problems.append({"loc": "password", "msg": f"Password must be at most {MAX_PASSWORD_BYTES} bytes"})
    if problems:
        raise ValidationError("Invalid registration", problems)

    if await db.users.find_one({"email": email}):
        raise ConflictError("Email already registered")
    if await db.users.find_one({"username": username}):
        raise ConflictError("Username already taken")

    user_dict = {
        "id": str(uuid.uuid4()),
        "username": username,
        "email": email,
        "password": hashpw(password.encode("utf-8"), gensalt()).decode("utf-8"),
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }
    try:
        await db.users.insert_one(user_dict)
    except DuplicateKeyError:
        raise ConflictError("Username or email already registered")
    user_dict.pop("_id", None)
    logger.info(f"Registered user {user_dict['id']} ({username})")
    return user_dict


async def authenticate(db, email: str, password: str) -> dict:
    user = await db.users.find_one({"email": normalize_email(email)}, {"_id": 0})
    password_bytes = password.encode("utf-8")
    if (
        not user
        or len(password_bytes) > MAX_PASSWORD_BYTES
        or not checkpw(password_bytes, user["password"].encode("utf-8"))
    ):
        logger.warning(f"Failed login for email: {email}")
        raise InvalidCredentialsError()
    return user


async def get_user_by_id(db, user_id: str):
    return await db.users.find_one({"id": user_id}, {"_id": 0})
