"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from welcome_home.api.middleware import RequestIDMiddleware, MetricsMiddleware
from welcome_home.api.v1 import fees, move_in
from welcome_home.infrastructure.observability.logging import setup_logging
from welcome_home.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Welcome Home Calculator",
        description="Rent quote and move-in cost calculations for leasing offices",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(move_in.router, prefix="/v1", tags=["welcome-home"])
    app.include_router(fees.router, prefix="/v1", tags=["fees"])

    return app


app = create_app()
