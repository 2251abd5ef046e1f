# config.py
import os
from typing import List

from dotenv import load_dotenv
from fastapi import Request
from pydantic import BaseModel


class ConfigurationError(RuntimeError):
    pass


class Settings(BaseModel):
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "quiz_maker_db"
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    cors_origins: List[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build the settings from the process environment (and a .env file if present)."""
        load_dotenv()
        secret = os.getenv("JWT_SECRET")
        if not secret:
            raise ConfigurationError("JWT_SECRET must be set")

        try:
            expire_minutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
        except ValueError:
            raise ConfigurationError("ACCESS_TOKEN_EXPIRE_MINUTES must be an integer")

        origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
        return cls(
            mongodb_uri=os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
            mongodb_db=os.getenv("MONGODB_DB", "quiz_maker_db"),
            jwt_secret=secret,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            access_token_expire_minutes=expire_minutes,
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
