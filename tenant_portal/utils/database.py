"""
Database utilities for tenant portal
"""

from typing import List, Optional

import asyncpg
import structlog
from asyncpg import Pool

from tenant_portal.models.tenant import Tenant
from tenant_portal.utils.config import DatabaseConfig
from tenant_portal.utils.store import TenantStoreError


logger = structlog.get_logger(__name__)

CREATE_TENANTS_TABLE = """
    CREATE TABLE IF NOT EXISTS tenants (
        id VARCHAR(50) PRIMARY KEY,
        name VARCHAR(100) NOT NULL
    )
"""


class TenantDatabase:
    """PostgreSQL-backed tenant store"""

    backend = "postgres"

    def __init__(self, config: DatabaseConfig):
        self.pool: Optional[Pool] = None
        self.db_config = config.pool_kwargs()

    async def initialize(self):
        """Initialize database connection pool and schema"""
        try:
            self.pool = await asyncpg.create_pool(**self.db_config)
            logger.info("Database pool created", database=self.db_config['database'])

            async with self.pool.acquire() as conn:
                await conn.execute('SELECT 1')
                logger.info("Database connection test successful")
                await conn.execute(CREATE_TENANTS_TABLE)
                logger.info("Tenants table ready")

        except Exception as e:
            logger.error("Failed to initialize database", error=str(e))
            raise TenantStoreError("Failed to initialize database") from e

    async def close(self):
        """Close database connection pool"""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")

    def _require_pool(self) -> Pool:
        if not self.pool:
            raise TenantStoreError("Database pool not initialized")
        return self.pool

    async def list_tenants(self) -> List[Tenant]:
        """Get all tenants"""
        pool = self._require_pool()
        async with pool.acquire() as conn:
            try:
                rows = await conn.fetch("SELECT id, name FROM tenants ORDER BY id")
                return [Tenant(**dict(row)) for row in rows]

            except Exception as e:
                logger.error("Failed to list tenants", error=str(e))
                raise TenantStoreError("Failed to list tenants") from e

    async def create_tenant(self, tenant: Tenant) -> None:
        """Insert a new tenant; a duplicate id is a store failure"""
        pool = self._require_pool()
        async with pool.acquire() as conn:
            try:
                await conn.execute(
                    "INSERT INTO tenants (id, name) VALUES ($1, $2)",
                    tenant.id,
                    tenant.name
                )
                logger.info("Tenant created", tenant_id=tenant.id)

            except asyncpg.UniqueViolationError as e:
                logger.warning("Tenant already exists", tenant_id=tenant.id)
                raise TenantStoreError(f"Tenant '{tenant.id}' already exists") from e
            except Exception as e:
                logger.error("Failed to create tenant", tenant_id=tenant.id, error=str(e))
                raise TenantStoreError("Failed to create tenant") from e

    async def get_tenant(self, tenant_id: str) -> Optional[Tenant]:
        """Get tenant by ID"""
        pool = self._require_pool()
        async with pool.acquire() as conn:
            try:
                row = await conn.fetchrow(
                    "SELECT id, name FROM tenants WHERE id = $1",
                    tenant_id
                )
                if row:
                    return Tenant(**dict(row))
                return None

            except Exception as e:
                logger.error("Failed to get tenant", tenant_id=tenant_id, error=str(e))
                raise TenantStoreError("Failed to get tenant") from e

    async def count_tenants(self) -> int:
        """Count stored tenants"""
        pool = self._require_pool()
        async with pool.acquire() as conn:
            try:
                count = await conn.fetchval("SELECT COUNT(*) FROM tenants")
                return count or 0

            except Exception as e:
                logger.error("Failed to count tenants", error=str(e))
                raise TenantStoreError("Failed to count tenants") from e
