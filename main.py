import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, get_settings
from database import create_db_and_tables, create_engine_lock, create_memory_engine
from errors import register_exception_handlers
from logging_config import configure_logging
from routes import admin, auth, tasks
from seed import seed_defaults
from stores.tasks import TaskStore
from stores.users import UserStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Seed default accounts before the server takes requests

    Seed passwords are hashed here, so no request can see an account
    without a usable hash.
    """
    settings = app.state.settings
    if settings.seed_users:
        logger.info("Seeding default accounts...")
        await run_in_threadpool(
            seed_defaults, app.state.user_store, app.state.task_store, settings.seed_password
        )
    logger.info("Task API ready")

    yield

    logger.info("Task API shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API with its own in-memory stores

    Args:
        settings: Configuration, read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(
        title="Task API",
        description="Authenticated to-do API with an admin role",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    engine = create_memory_engine(echo=settings.sql_echo)
    create_db_and_tables(engine)

    # One lock for every store, they share a single connection
    engine_lock = create_engine_lock()

    app.state.settings = settings
    app.state.user_store = UserStore(engine, bcrypt_rounds=settings.bcrypt_rounds, lock=engine_lock)
    app.state.task_store = TaskStore(engine, lock=engine_lock)

    # CORS configuration; credentials are needed for the session cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(auth.router, tags=["auth"])
    app.include_router(tasks.router, tags=["tasks"])
    app.include_router(admin.router, prefix="/admin", tags=["admin"])

    @app.get("/")
    def read_root():
        """Root endpoint"""
        return {
            "message": "Task API is running",
            "version": "1.0.0",
            "docs": "/docs"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    return app


if __name__ == "__main__":
    settings = get_settings()
    # create_app already configured logging, keep uvicorn from replacing it
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
