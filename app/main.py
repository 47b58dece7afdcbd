# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from app.core.celery_app import create_celery_app
from app.core.config import Settings, get_settings
from app.core.database import Database
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.frontend.routes import STATIC_DIR
from app.frontend.routes import router as frontend_router
from app.ticket.publisher import BulkDeletePublisher, CeleryBulkDeletePublisher
from app.ticket.routes import router as ticket_router
from app.user.routes import router as user_router


def create_app(
    settings: Settings,
    database: Database | None = None,
    bulk_delete_publisher: BulkDeletePublisher | None = None,
) -> FastAPI:
    database = database or Database(settings.DATABASE_URL)
    if bulk_delete_publisher is None:
        celery_app = create_celery_app(settings)
        bulk_delete_publisher = CeleryBulkDeletePublisher(celery_app, settings.RABBITMQ_TICKETS_QUEUE_NAME)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.schema_auto_sync:
            database.create_all()
        else:
            logger.info("Schema auto-sync disabled")
        yield
        database.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESC,
        version=settings.APP_VERSION,
        docs_url="/api/docs",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.bulk_delete_publisher = bulk_delete_publisher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.cors_methods,
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(ticket_router)
    app.include_router(user_router)
    app.include_router(frontend_router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok"}

    return app


def build_app() -> FastAPI:
    """Entry point for `uvicorn app.main:build_app --factory`."""
    settings = get_settings()
    configure_logging(settings)
    return create_app(settings)

