import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import api_router
from .config import Settings, load_settings, ensure_data_dir
from .database import Database

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own database handle."""
    if settings is None:
        settings = load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle startup and shutdown events."""
        ensure_data_dir(settings)
        app.state.database.create_all()
        yield
        # Cleanup on shutdown
        app.state.database.dispose()

    app = FastAPI(
        title="Personal Finance Ledger",
        description="Income, expenses, monthly budgets and statistics",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = Database(settings.resolved_database_url)

    # CORS for local development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
