"""
Tenant management routes
"""

from fastapi import APIRouter, Depends, HTTPException
import structlog

from tenant_portal.models.tenant import (
    Tenant, TenantCreate, TenantListResponse, TenantCreatedResponse
)
from tenant_portal.routes.dependencies import get_store
from tenant_portal.utils.store import TenantStore, TenantStoreError

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=TenantListResponse)
async def list_tenants(store: TenantStore = Depends(get_store)):
    """List all tenants"""
    try:
        tenants = await store.list_tenants()
        return TenantListResponse(tenants=tenants)

    except TenantStoreError as e:
        logger.error("Failed to list tenants", error=str(e))
        raise HTTPException(status_code=500, detail="Error fetching tenants")


@router.post("", response_model=TenantCreatedResponse)
async def create_tenant(
    tenant_data: TenantCreate,
    store: TenantStore = Depends(get_store)
):
    """Create a new tenant"""
    try:
        logger.info("Creating tenant", tenant_id=tenant_data.id, name=tenant_data.name)
        await store.create_tenant(Tenant(id=tenant_data.id, name=tenant_data.name))
        return TenantCreatedResponse(success=True, message="Tenant created")

    except TenantStoreError as e:
        logger.error("Failed to create tenant", tenant_id=tenant_data.id, error=str(e))
        raise HTTPException(status_code=500, detail="Error creating tenant")


@router.get("/{tenant_id}", response_model=Tenant)
async def get_tenant(
    tenant_id: str,
    store: TenantStore = Depends(get_store)
):
    """Get tenant details"""
    try:
        tenant = await store.get_tenant(tenant_id)
    except TenantStoreError as e:
        logger.error("Failed to get tenant", tenant_id=tenant_id, error=str(e))
        raise HTTPException(status_code=500, detail="Error fetching tenant")

    if tenant is None:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant
