"""
Utility modules for tenant portal
"""

from .store import TenantStore, TenantStoreError, create_store
from .host import extract_tenant_id, is_loopback, strip_port

__all__ = [
    "TenantStore",
    "TenantStoreError",
    "create_store",
    "extract_tenant_id",
    "is_loopback",
    "strip_port",
]
