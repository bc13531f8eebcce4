"""
Configuration Management
Environment-based configuration for the tenant store and application settings
"""

from pathlib import Path
from typing import List, Optional

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings

logger = structlog.get_logger(__name__)

STORE_BACKENDS = ("postgres", "memory")


class DatabaseConfig(BaseSettings):
    """Database Configuration - uses service-specific credentials"""

    # Backend selection
    store_backend: str = "postgres"

    # Connection settings
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "tenants_db"
    db_service_user: str = "tenant_portal"
    db_service_password: str = "tenant_portal_secure_pass_change_me"

    # Pool settings
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_command_timeout: int = 30

    class Config:
        env_prefix = ""
        case_sensitive = False

    @field_validator('store_backend')
    @classmethod
    def validate_store_backend(cls, v):
        v = v.lower()
        if v not in STORE_BACKENDS:
            raise ValueError(f"Store backend must be one of: {', '.join(STORE_BACKENDS)}")
        return v

    @field_validator('postgres_port')
    @classmethod
    def validate_postgres_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('Postgres port must be between 1 and 65535')
        return v

    def pool_kwargs(self) -> dict:
        """Keyword arguments for asyncpg.create_pool"""
        return {
            'host': self.postgres_host,
            'port': self.postgres_port,
            'database': self.postgres_db,
            'user': self.db_service_user,
            'password': self.db_service_password,
            'min_size': self.db_pool_min_size,
            'max_size': self.db_pool_max_size,
            'command_timeout': self.db_command_timeout,
        }

    def log_config(self):
        """Log configuration (without sensitive data)"""
        if self.store_backend == "memory":
            logger.info("Tenant store configured", backend=self.store_backend)
            return
        logger.info(
            "Tenant store configured",
            backend=self.store_backend,
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_db,
            user=self.db_service_user,
        )


class AppConfig(BaseSettings):
    """Application Configuration"""

    # Service info
    service_name: str = "tenant-portal"
    service_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Host routing
    frontend_dir: Path = Path("frontend")
    landing_page: str = "index.html"
    tenant_page: str = "tenant.html"
    loopback_hosts: List[str] = ["localhost", "127.0.0.1"]

    class Config:
        env_prefix = "APP_"
        case_sensitive = False

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('Port must be between 1 and 65535')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        return v.upper()


# Global configuration instances
_db_config: Optional[DatabaseConfig] = None
_app_config: Optional[AppConfig] = None


def get_db_config() -> DatabaseConfig:
    """Get database configuration instance"""
    global _db_config
    if _db_config is None:
        _db_config = DatabaseConfig()
    return _db_config


def get_app_config() -> AppConfig:
    """Get application configuration instance"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
