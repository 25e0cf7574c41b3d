# tests/conftest.py
from __future__ import annotations

import os
from decimal import Decimal

# Fără latență simulată în teste; setat înainte de importul aplicației.
os.environ.setdefault("CATALOG_LATENCY_SCALE", "0")

import pytest
from fastapi.testclient import TestClient

from storefront.services.product_service import ProductService
from storefront.store import CatalogStore

from tests.helpers import make_product


@pytest.fixture
def seed_products():
    """Trei produse cu id-urile 1, 2, 3."""
    return [
        make_product(1, name="Castle Quest", brand="Meeple Works", is_featured=True),
        make_product(
            2,
            name="Robo Pup",
            brand="BrightSpark",
            category="Electronic & Interactive",
            sale_price=Decimal("7.50"),
        ),
        make_product(
            3,
            name="Stacking Rings",
            brand="TinyHands",
            description="Wooden rings for toddlers",
            category="Educational & STEM Toys",
            is_featured=True,
            sale_price=Decimal("8.00"),
        ),
    ]


@pytest.fixture
def store(seed_products) -> CatalogStore:
    return CatalogStore(seed_products)


@pytest.fixture
def service(store) -> ProductService:
    return ProductService(store, latency_scale=0)


@pytest.fixture
def client(store):
    """TestClient cu store proaspăt per test (override pe dependency)."""
    from storefront.main import app
    from storefront.store import get_store

    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_store, None)
