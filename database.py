# database.py
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient

from config import Settings

logger = logging.getLogger(__name__)


def connect(settings: Settings) -> AsyncIOMotorClient:
    logger.info(f"Connecting to MongoDB database {settings.mongodb_db}")
    return AsyncIOMotorClient(settings.mongodb_uri)


async def init_db(db):
    await db.users.create_index("id", unique=True)
    await db.users.create_index("username", unique=True)
    await db.users.create_index("email", unique=True)
    await db.quizzes.create_index("id", unique=True)
    await db.jobs.create_index("id", unique=True)


def get_db(request: Request):
    return request.app.state.db
