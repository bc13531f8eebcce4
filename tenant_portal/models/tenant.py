"""
Tenant data models and schemas
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Tenant(BaseModel):
    """Tenant record, keyed by its subdomain label"""
    id: str = Field(..., description="Tenant ID, used as the subdomain label")
    name: str = Field(..., description="Tenant display name")

    model_config = ConfigDict(from_attributes=True)


# Create tenant schema (for API requests)
class TenantCreate(Tenant):
    """Schema for creating a new tenant"""


# Tenant list response
class TenantListResponse(BaseModel):
    """Schema for tenant list API response"""
    tenants: List[Tenant] = Field(default_factory=list, description="List of tenants")


class TenantCreatedResponse(BaseModel):
    """Schema for tenant creation API response"""
    success: bool = Field(default=True)
    message: str = Field(default="Tenant created")
