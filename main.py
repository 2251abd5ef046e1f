# main.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Settings
from database import connect, init_db
from errors import register_exception_handlers
from routes import auth, jobs, quizzes, users

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None, db=None) -> FastAPI:
    """Build the API. Pass `db` to run against an already-open database (tests)."""
    if settings is None:
        settings = Settings.from_env()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if app.state.db is None:
            client = connect(settings)
            app.state.db = client[settings.mongodb_db]
        await init_db(app.state.db)
        logger.info("Database indexes ready")
        yield
        if client is not None:
            client.close()

    app = FastAPI(title="Quiz Maker API", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(auth.router)
    app.include_router(quizzes.router)
    app.include_router(jobs.router)
    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:create_app", factory=True, host="127.0.0.1", port=8000, reload=True)
