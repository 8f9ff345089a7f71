"""
Newsdesk - Main FastAPI Application
"""

import asyncio
import subprocess
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from loguru import logger
from sqlalchemy import text
from starlette.middleware.sessions import SessionMiddleware

from newsdesk.api.router import site_router
from newsdesk.core.config import settings
from newsdesk.core.database import close_db, engine, init_db
from newsdesk.core.exceptions import setup_exception_handlers
from newsdesk.core.logging import configure_logging


BACKEND_DIR = Path(__file__).resolve().parent.parent


async def wait_for_database(max_retries: int = 30, retry_delay: int = 2):
    """Wait for database to be ready"""
    logger.info("Waiting for database to be ready...")

    for attempt in range(max_retries):
        try:
            async with engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database is ready!")
            return True
        except Exception as e:
            logger.warning(f"Database not ready (attempt {attempt + 1}/{max_retries}): {e}")
            if attempt < max_retries - 1:
                await asyncio.sleep(retry_delay)
            else:
                logger.error("Database failed to become ready after maximum retries")
                return False

    return False


async def apply_migrations() -> bool:
    """Apply database migrations"""
    if not settings.RUN_MIGRATIONS:
        logger.warning("RUN_MIGRATIONS disabled; skipping alembic upgrade.")
        return True

    logger.info("Applying database migrations...")

    try:
        result = await asyncio.to_thread(
            subprocess.run,
            [sys.executable, "-m", "alembic", "upgrade", "head"],
            capture_output=True,
            text=True,
            cwd=str(BACKEND_DIR),
            check=False,
        )
    except FileNotFoundError as exc:
        logger.error(f"Alembic command not found: {exc}")
        return False

    if result.returncode == 0:
        if result.stdout.strip():
            logger.info(f"Alembic output:\n{result.stdout.strip()}")
        logger.info("Database migrations applied successfully.")
        return True

    logger.error(f"Alembic upgrade failed with return code {result.returncode}")
    if result.stdout.strip():
        logger.error(f"Alembic stdout:\n{result.stdout.strip()}")
    if result.stderr.strip():
        logger.error(f"Alembic stderr:\n{result.stderr.strip()}")
    return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize application on startup and release connections on shutdown"""
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    db_ready = await wait_for_database()
    if not db_ready:
        logger.error("Database is not ready; aborting startup.")
        raise RuntimeError("Database connection failed during startup")

    migrations_ok = await apply_migrations()
    if not migrations_ok:
        logger.error("Database migrations failed; aborting startup.")
        raise RuntimeError("Database migrations failed during startup")

    await init_db()
    logger.info("Application startup complete!")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_db()


configure_logging()

# Create FastAPI app
app = FastAPI(
    title=f"{settings.APP_NAME}",
    description="News items: public listing and admin management",
    version=settings.VERSION,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
    openapi_url="/openapi.json" if settings.ENVIRONMENT != "production" else None,
    lifespan=lifespan,
)

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Signed cookie session carrying flash notices between redirects
app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY)

# Setup exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(site_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "service": "newsdesk",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
        }
    )


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint"""
    return RedirectResponse(url=app.url_path_for("news_index"))

