"""
API routes for tenant portal
"""

from . import health, pages, tenants

__all__ = ["health", "pages", "tenants"]
