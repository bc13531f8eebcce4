"""
Health check routes for tenant portal
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Request, HTTPException
import structlog

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    config = request.app.state.config
    try:
        # Test store connection
        if hasattr(request.app.state, 'store'):
            await request.app.state.store.count_tenants()
            store_status = "healthy"
        else:
            store_status = "not_initialized"

        return {
            "service": config.service_name,
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "store": store_status,
            "version": config.service_version
        }

    except Exception as e:
        logger.error("Health check failed", error=str(e))
        raise HTTPException(status_code=503, detail="Service unavailable")


@router.get("/health/detailed")
async def detailed_health_check(request: Request):
    """Detailed health check with component status"""
    config = request.app.state.config
    health_data = {
        "service": config.service_name,
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": config.service_version,
        "components": {}
    }

    try:
        if hasattr(request.app.state, 'store'):
            store = request.app.state.store
            health_data["components"]["store"] = {
                "status": "healthy",
                "backend": store.backend,
                "tenant_count": await store.count_tenants()
            }
        else:
            health_data["components"]["store"] = {
                "status": "not_initialized"
            }
    except Exception as e:
        health_data["components"]["store"] = {
            "status": "unhealthy",
            "error": str(e)
        }
        health_data["status"] = "degraded"

    return health_data
