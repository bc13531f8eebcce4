"""
Pytest fixtures for tenant portal tests
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from tenant_portal.main import create_app
from tenant_portal.models.tenant import Tenant
from tenant_portal.utils.config import AppConfig, DatabaseConfig
from tenant_portal.utils.memory_store import InMemoryTenantStore
from tenant_portal.utils.store import TenantStoreError

LANDING_HTML = "<html><body>landing</body></html>"
TENANT_HTML = "<html><body>tenant</body></html>"


@pytest.fixture
def frontend_dir(tmp_path):
    """Frontend directory with landing and tenant pages"""
    (tmp_path / "index.html").write_text(LANDING_HTML)
    (tmp_path / "tenant.html").write_text(TENANT_HTML)
    (tmp_path / "style.css").write_text("body { margin: 0; }")
    return tmp_path


@pytest.fixture
def app_config(frontend_dir) -> AppConfig:
    """Application configuration pointing at the test frontend"""
    return AppConfig(frontend_dir=frontend_dir)


@pytest.fixture
def db_config() -> DatabaseConfig:
    """Memory-backed store configuration"""
    return DatabaseConfig(store_backend="memory")


@pytest.fixture
def memory_store() -> InMemoryTenantStore:
    """Store seeded with one tenant"""
    return InMemoryTenantStore([Tenant(id="acme", name="Acme Corp")])


@pytest.fixture
def client(app_config, db_config, memory_store):
    """Test client running the app lifespan over the seeded store"""
    app = create_app(app_config, db_config, store=memory_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_store():
    """Store whose data operations always fail"""
    store = MagicMock()
    store.backend = "failing"
    store.initialize = AsyncMock()
    store.close = AsyncMock()
    store.list_tenants = AsyncMock(side_effect=TenantStoreError("connection refused"))
    store.create_tenant = AsyncMock(side_effect=TenantStoreError("connection refused"))
    store.get_tenant = AsyncMock(side_effect=TenantStoreError("connection refused"))
    store.count_tenants = AsyncMock(side_effect=TenantStoreError("connection refused"))
    return store


@pytest.fixture
def failing_client(app_config, db_config, failing_store):
    """Test client whose store fails every operation"""
    app = create_app(app_config, db_config, store=failing_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mock_db_pool():
    """Mock asyncpg database pool"""
    pool = MagicMock()
    pool.close = AsyncMock()
    conn = AsyncMock()

    # Configure connection context manager
    pool.acquire.return_value.__aenter__ = AsyncMock(return_value=conn)
    pool.acquire.return_value.__aexit__ = AsyncMock(return_value=None)

    return pool, conn
