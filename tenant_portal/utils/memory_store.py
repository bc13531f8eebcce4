"""
In-memory tenant store (no persistence)
"""

import asyncio
from typing import Dict, List, Optional

import structlog

from tenant_portal.models.tenant import Tenant


logger = structlog.get_logger(__name__)


class InMemoryTenantStore:
    """Tenant store backed by a dict guarded by an asyncio lock

    Creating a tenant with an existing id overwrites the previous record.
    """

    backend = "memory"

    def __init__(self, tenants: Optional[List[Tenant]] = None):
        self._tenants: Dict[str, Tenant] = {}
        self._lock = asyncio.Lock()
        for tenant in tenants or []:
            self._tenants[tenant.id] = tenant.model_copy()

    async def initialize(self):
        logger.info("In-memory tenant store ready", tenant_count=len(self._tenants))

    async def close(self):
        logger.info("In-memory tenant store closed")

    async def list_tenants(self) -> List[Tenant]:
        async with self._lock:
            return [tenant.model_copy() for tenant in self._tenants.values()]

    async def create_tenant(self, tenant: Tenant) -> None:
        async with self._lock:
            if tenant.id in self._tenants:
                logger.info("Overwriting existing tenant", tenant_id=tenant.id)
            self._tenants[tenant.id] = Tenant(id=tenant.id, name=tenant.name)
        logger.info("Tenant created", tenant_id=tenant.id)

    async def get_tenant(self, tenant_id: str) -> Optional[Tenant]:
        async with self._lock:
            tenant = self._tenants.get(tenant_id)
            return tenant.model_copy() if tenant is not None else None

    async def count_tenants(self) -> int:
        async with self._lock:
            return len(self._tenants)
