"""
Business logic services for tenant portal
"""

from .tenant_service import TenantResolver, Resolution, ResolutionKind

__all__ = ["TenantResolver", "Resolution", "ResolutionKind"]
