"""
Tenant Portal - Main Application
Resolves request subdomains to tenants and manages tenant records
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import structlog

from tenant_portal.routes import health, pages, tenants
from tenant_portal.utils.config import AppConfig, DatabaseConfig, get_app_config, get_db_config
from tenant_portal.utils.store import TenantStore, create_store


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured logging"""
    level = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging(get_app_config().log_level)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info("Starting Tenant Portal")

    # Initialize tenant store
    store = getattr(app.state, 'store', None)
    if store is None:
        db_config = app.state.db_config
        db_config.log_config()
        store = create_store(db_config)

    try:
        await store.initialize()
        app.state.store = store
        logger.info("Tenant store initialized", backend=store.backend)
    except Exception as e:
        logger.error("Failed to initialize tenant store", error=str(e))
        raise

    yield

    # Cleanup
    await app.state.store.close()
    logger.info("Tenant Portal shutdown complete")


async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    logger.info(
        "Request received",
        method=request.method,
        url=str(request.url),
        host=request.headers.get("host"),
        client_ip=request.client.host if request.client else "unknown"
    )

    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code
    )

    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors"""
    logger.warning(
        "Invalid request body",
        method=request.method,
        url=str(request.url),
        errors=str(exc.errors())
    )
    return JSONResponse(status_code=400, content={"detail": "Invalid request body"})


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        method=request.method,
        url=str(request.url),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        }
    )


def create_app(
    app_config: Optional[AppConfig] = None,
    db_config: Optional[DatabaseConfig] = None,
    store: Optional[TenantStore] = None
) -> FastAPI:
    """Build the FastAPI application; a preset store skips backend selection"""
    app_config = app_config or get_app_config()
    db_config = db_config or get_db_config()

    app = FastAPI(
        title="Tenant Portal",
        description="Subdomain-based tenant resolution and tenant management",
        version=app_config.service_version,
        lifespan=lifespan
    )
    app.state.config = app_config
    app.state.db_config = db_config
    if store is not None:
        app.state.store = store

    app.middleware("http")(log_requests)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # Register routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(tenants.router, prefix="/api/tenants", tags=["Tenants"])
    app.include_router(pages.router, tags=["Pages"])

    # Serve static files
    app.mount(
        "/static",
        StaticFiles(directory=str(app_config.frontend_dir), check_dir=False),
        name="static"
    )

    return app


def run():
    """Run the service under uvicorn"""
    import uvicorn

    app_config = get_app_config()
    uvicorn.run(
        create_app(app_config),
        host=app_config.host,
        port=app_config.port,
        log_level=app_config.log_level.lower()
    )


if __name__ == "__main__":
    run()
