"""
Host-based page routes
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, PlainTextResponse
import structlog

from tenant_portal.routes.dependencies import get_app_settings, get_resolver
from tenant_portal.services.tenant_service import Resolution, ResolutionKind, TenantResolver
from tenant_portal.utils.config import AppConfig
from tenant_portal.utils.store import TenantStoreError

logger = structlog.get_logger(__name__)

router = APIRouter()

NO_TENANT_MESSAGE = "Main application - No tenant selected"


async def _resolve(request: Request, resolver: TenantResolver) -> Resolution:
    host = request.headers.get("host", "")
    try:
        return await resolver.resolve(host)
    except TenantStoreError as e:
        logger.error("Failed to resolve tenant", host=host, error=str(e))
        raise HTTPException(status_code=500, detail="Error resolving tenant")


def _serve_page(config: AppConfig, page: str) -> FileResponse:
    path = config.frontend_dir / page
    if not path.is_file():
        logger.error("Frontend page missing", path=str(path))
        raise HTTPException(status_code=503, detail="Frontend not available")
    return FileResponse(path, media_type="text/html")


@router.get("/")
async def host_dispatch(
    request: Request,
    resolver: TenantResolver = Depends(get_resolver),
    config: AppConfig = Depends(get_app_settings)
):
    """Serve the landing page, the tenant page, or a not-found message"""
    resolution = await _resolve(request, resolver)

    if resolution.kind == ResolutionKind.LANDING:
        return _serve_page(config, config.landing_page)

    if resolution.kind == ResolutionKind.NOT_FOUND:
        return PlainTextResponse(f"Tenant '{resolution.tenant_id}' not found")

    return _serve_page(config, config.tenant_page)


@router.get("/tenant-info", response_class=PlainTextResponse)
async def tenant_info(
    request: Request,
    resolver: TenantResolver = Depends(get_resolver)
):
    """Describe the tenant addressed by the request host"""
    resolution = await _resolve(request, resolver)

    if resolution.kind != ResolutionKind.TENANT:
        return NO_TENANT_MESSAGE

    tenant = resolution.tenant
    return f"Tenant ID: {tenant.id}, Name: {tenant.name}"
