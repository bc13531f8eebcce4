"""
Tenant resolution business logic
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import structlog

from tenant_portal.models.tenant import Tenant
from tenant_portal.utils.host import extract_tenant_id, is_loopback
from tenant_portal.utils.store import TenantStore


logger = structlog.get_logger(__name__)


class ResolutionKind(str, Enum):
    """Outcome of resolving a request host"""
    LANDING = "landing"
    TENANT = "tenant"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Resolution:
    """Resolved host: what to serve and for which tenant"""
    kind: ResolutionKind
    tenant_id: str
    tenant: Optional[Tenant] = None


class TenantResolver:
    """Maps a request's Host header to a tenant from the store"""

    def __init__(self, store: TenantStore, loopback_hosts: Iterable[str]):
        self.store = store
        self.loopback_hosts = list(loopback_hosts)

    async def resolve(self, host: str) -> Resolution:
        """
        Resolve a Host header value.
        Loopback hosts skip the store; store failures propagate.
        """
        tenant_id = extract_tenant_id(host)

        if is_loopback(host, self.loopback_hosts):
            logger.debug("Loopback host, serving landing page", host=host)
            return Resolution(ResolutionKind.LANDING, tenant_id)

        if not tenant_id:
            return Resolution(ResolutionKind.NOT_FOUND, tenant_id)

        tenant = await self.store.get_tenant(tenant_id)
        if tenant is None:
            logger.info("Tenant not found", host=host, tenant_id=tenant_id)
            return Resolution(ResolutionKind.NOT_FOUND, tenant_id)

        logger.debug("Tenant resolved", host=host, tenant_id=tenant_id)
        return Resolution(ResolutionKind.TENANT, tenant_id, tenant)
