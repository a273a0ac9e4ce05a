"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from eligibility_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from eligibility_gateway.api.v1 import eligibility, customers
from eligibility_gateway.infrastructure.database.session import init_db
from eligibility_gateway.infrastructure.observability.logging import setup_logging
from eligibility_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Eligibility Gateway",
        description="Applicant eligibility checks backed by an external credit bureau",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(eligibility.router, prefix="/v1", tags=["eligibility"])
    app.include_router(customers.router, prefix="/v1", tags=["customers"])

    return app


app = create_app()
