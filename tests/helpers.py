# tests/helpers.py
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from storefront.schemas.product import Product


def make_product(product_id: int, **overrides: Any) -> Product:
    data: Dict[str, Any] = {
        "id": product_id,
        "name": f"Toy {product_id}",
        "brand": "TestBrand",
        "description": f"Description of toy {product_id}",
        "category": "Board Games & Puzzles",
        "subcategory": "Family",
        "material": "Cardboard",
        "price": Decimal("10.00"),
        "sale_price": None,
        "age_min": 3,
        "age_max": 8,
        "weight": Decimal("0.5"),
        "dimensions": {"length": Decimal("10"), "width": Decimal("10"), "height": Decimal("5")},
        "stock_quantity": 5,
        "images": [f"https://images.example.com/{product_id}.jpg"],
        "is_featured": False,
        "rating": Decimal("4.0"),
        "review_count": 3,
        "created_at": datetime(2024, 1, product_id, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return Product.model_validate(data)


def new_product_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "name": "Wooden Train Set",
        "brand": "RailKids",
        "description": "Forty-piece wooden railway with bridge",
        "category": "Building & Construction",
        "subcategory": "Trains",
        "material": "Wood",
        "price": "45.00",
        "ageMin": 3,
        "ageMax": 7,
        "weight": "2.1",
        "dimensions": {"length": "50", "width": "30", "height": "10"},
        "stockQuantity": 14,
        "images": [],
        "isFeatured": False,
    }
    payload.update(overrides)
    return payload
