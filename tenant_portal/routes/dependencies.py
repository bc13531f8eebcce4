"""
Shared route dependencies
"""

from fastapi import Depends, Request

from tenant_portal.services.tenant_service import TenantResolver
from tenant_portal.utils.config import AppConfig
from tenant_portal.utils.store import TenantStore


def get_store(request: Request) -> TenantStore:
    """Dependency to get the tenant store instance"""
    return request.app.state.store


def get_app_settings(request: Request) -> AppConfig:
    """Dependency to get the application configuration"""
    return request.app.state.config


def get_resolver(
    store: TenantStore = Depends(get_store),
    config: AppConfig = Depends(get_app_settings)
) -> TenantResolver:
    """Dependency to get a host resolver bound to the store"""
    return TenantResolver(store, config.loopback_hosts)
