"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog, manager and API client fixtures.

==============================================================================
"""

from datetime import date
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from stockroom.catalog import Catalog
from stockroom.config import Settings
from stockroom.main import Application
from stockroom.services import CatalogManager


# Fixed clock for delivery dates
TODAY = date(2026, 1, 1)


# ============================================================================
# DOMAIN FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> Catalog:
    """Empty catalog with a fixed clock."""
    return Catalog(today=lambda: TODAY)


@pytest.fixture
def manager(catalog: Catalog) -> CatalogManager:
    """Manager over the empty catalog."""
    return CatalogManager(catalog)


@pytest.fixture
def laptop_id(manager: CatalogManager) -> str:
    """Single Laptop with 20 units, the usual procurement target."""
    return manager.create_product("Laptop", 20, 1500.00, "good")


@pytest.fixture
def seeded_manager(manager: CatalogManager) -> CatalogManager:
    """Manager holding the demo catalog."""
    manager.seed_demo_products()
    return manager


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with demo seeding on."""
    return Settings(seed_demo_products=True, low_stock_threshold=10, delivery_lead_days=7)


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Test client over a freshly started application."""
    app = Application(settings).app
    with TestClient(app) as test_client:
        yield test_client
