"""
Tenant store interface and backend selection
"""

from typing import List, Optional, Protocol

from tenant_portal.models.tenant import Tenant
from tenant_portal.utils.config import DatabaseConfig


class TenantStoreError(Exception):
    """Raised when the backing store fails to complete an operation"""


class TenantStore(Protocol):
    """Operations every tenant store backend provides"""

    backend: str

    async def initialize(self) -> None: ...

    async def close(self) -> None: ...

    async def list_tenants(self) -> List[Tenant]: ...

    async def create_tenant(self, tenant: Tenant) -> None: ...

    async def get_tenant(self, tenant_id: str) -> Optional[Tenant]: ...

    async def count_tenants(self) -> int: ...


def create_store(config: DatabaseConfig) -> TenantStore:
    """Build the store backend named by the configuration"""
    if config.store_backend == "memory":
        from tenant_portal.utils.memory_store import InMemoryTenantStore
        return InMemoryTenantStore()

    from tenant_portal.utils.database import TenantDatabase
    return TenantDatabase(config)
