"""FastAPI application factory"""

from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from noel_solidarite.api.errors import register_exception_handlers
from noel_solidarite.api.middleware import MetricsMiddleware, RequestIDMiddleware
from noel_solidarite.api.v1 import donations, stats
from noel_solidarite.api.v1.schemas import HealthResponse
from noel_solidarite.config import settings
from noel_solidarite.infrastructure.observability.logging import setup_logging
from noel_solidarite.infrastructure.storage.repository import DonationRepository, InMemoryDonationRepository
from noel_solidarite.web import pages, site

# Setup structured logging
setup_logging(settings.log_level)


def create_app(
    repository: DonationRepository | None = None,
    static_dir: Path | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Each app owns its donation store; pass one in to share or swap it.
    """
    app = FastAPI(
        title="Noël de Solidarité",
        description="Donation intake service and donation pages",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.donation_repository = repository if repository is not None else InMemoryDonationRepository()
    app.state.static_dir = static_dir or settings.static_dir

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/api/health", response_model=HealthResponse)
    def health_check():
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc).isoformat(),
            service=settings.service_name,
        )

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(donations.router, prefix="/api", tags=["donations"])
    app.include_router(stats.router, prefix="/api", tags=["stats"])

    # Donation pages, then the static site catch-all (must stay last)
    app.include_router(pages.router, tags=["pages"])
    app.include_router(site.router, tags=["site"])

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn"""
    import uvicorn

    uvicorn.run("noel_solidarite.api.main:app", host=settings.host, port=settings.port)
