"""
Data models for tenant portal
"""

from .tenant import Tenant, TenantCreate, TenantListResponse, TenantCreatedResponse

__all__ = [
    "Tenant",
    "TenantCreate",
    "TenantListResponse",
    "TenantCreatedResponse",
]
