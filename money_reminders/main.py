from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from contextlib import asynccontextmanager
import uvicorn
import logging
import sys

from money_reminders.core.config import settings
from money_reminders.core.database_utils import check_database_connection, create_tables, missing_tables
from money_reminders.api.api import api_router
from money_reminders.api.errors import register_exception_handlers

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"Starting up {settings.PROJECT_NAME} ({settings.ENVIRONMENT.value})...")

    if settings.AUTO_CREATE_TABLES:
        create_tables()
        logger.info("Database tables ensured")
    else:
        missing = missing_tables()
        if missing:
            logger.warning(f"Missing database tables: {missing}")
            logger.warning("Run `alembic upgrade head` before serving requests")
        else:
            logger.info("All required database tables exist")

    yield

    logger.info(f"{settings.PROJECT_NAME} shutdown complete")


def create_application() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Track who owes you money and send them a WhatsApp nudge",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    if settings.METRICS_ENABLED:
        from prometheus_fastapi_instrumentator import Instrumentator

        Instrumentator().instrument(app).expose(app, endpoint="/metrics")
        logger.info("Prometheus metrics exposed at /metrics")

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url=f"{settings.API_PREFIX}/docs")

    @app.get("/health", tags=["Health Check"])
    def health_check():
        return {
            "status": "healthy",
            "project": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "database": "healthy" if check_database_connection() else "unhealthy",
        }

    return app


app = create_application()


if __name__ == "__main__":
    uvicorn.run(
        "money_reminders.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )
