# storefront/services/product_service.py
from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Union

from fastapi import Depends

from storefront.core.settings import settings
from storefront.schemas.product import (
    DeleteResult,
    Product,
    ProductCreate,
    ProductUpdate,
)
from storefront.store import CatalogStore, get_store
from storefront.utils import parse_int_prefix

# Latențe de bază (ms) per operație, înmulțite cu latency_scale.
BASE_DELAYS_MS: Dict[str, int] = {
    "get_all": 300,
    "get_by_id": 200,
    "get_featured": 250,
    "get_deals": 300,
    "get_by_category": 300,
    "search": 350,
    "create": 400,
    "update": 350,
    "delete": 300,
}

ProductId = Union[int, str, float]


class ProductNotFoundError(Exception):
    """Ridicată de get_by_id/update/delete când niciun produs nu are id-ul cerut."""

    def __init__(self, product_id: Any):
        super().__init__("Product not found")
        self.product_id = product_id


def _clone(product: Product) -> Product:
    return product.model_copy(deep=True)


class ProductService:
    """
    Interfața asincronă de acces la catalog.

    Fiecare operație simulează latența de rețea și întoarce copii independente:
    modificarea unui rezultat nu afectează store-ul sau alți apelanți.
    Mutațiile se fac după `await`, fără alte puncte de suspendare, deci sub asyncio
    nicio mutație parțială nu e vizibilă altor apeluri.
    """

    def __init__(self, store: CatalogStore, *, latency_scale: float = 0.0) -> None:
        self.store = store
        self.latency_scale = latency_scale

    async def _delay(self, op: str) -> None:
        # sleep(0) păstrează operația awaitable chiar fără latență
        await asyncio.sleep(max(0.0, BASE_DELAYS_MS[op] / 1000 * self.latency_scale))

    def _require(self, product_id: ProductId) -> Product:
        pid = parse_int_prefix(product_id)
        obj = self.store.get(pid) if pid is not None else None
        if obj is None:
            raise ProductNotFoundError(product_id)
        return obj

    # --- Read ---
    async def get_all(self) -> List[Product]:
        await self._delay("get_all")
        return [_clone(p) for p in self.store]

    async def get_by_id(self, product_id: ProductId) -> Product:
        await self._delay("get_by_id")
        return _clone(self._require(product_id))

    async def get_featured(self) -> List[Product]:
        await self._delay("get_featured")
        return [_clone(p) for p in self.store.filter(lambda p: p.is_featured)]

    async def get_deals(self) -> List[Product]:
        await self._delay("get_deals")
        return [_clone(p) for p in self.store.filter(lambda p: p.sale_price is not None)]

    async def get_by_category(self, category: str) -> List[Product]:
        await self._delay("get_by_category")
        return [_clone(p) for p in self.store.filter(lambda p: p.category == category)]

    async def search(self, query: str) -> List[Product]:
        """OR pe name/brand/description/category, substring case-insensitive; "" potrivește tot."""
        await self._delay("search")
        q = (query or "").lower()

        def _matches(p: Product) -> bool:
            return (
                q in p.name.lower()
                or q in p.brand.lower()
                or q in p.description.lower()
                or q in p.category.lower()
            )

        return [_clone(p) for p in self.store.filter(_matches)]

    # --- Write ---
    async def create(self, data: Union[ProductCreate, Mapping[str, Any]]) -> Product:
        payload = data if isinstance(data, ProductCreate) else ProductCreate.model_validate(data)
        await self._delay("create")
        obj = Product(
            **payload.model_dump(),
            id=self.store.next_id(),
            rating=Decimal("0"),
            review_count=0,
            created_at=datetime.now(timezone.utc),
        )
        self.store.add(obj)
        return _clone(obj)

    async def update(
        self, product_id: ProductId, data: Union[ProductUpdate, Mapping[str, Any]]
    ) -> Product:
        """
        Actualizează câmpurile **furnizate** (inclusiv către None, ex. salePrice=None).
        id și created_at nu pot fi modificate.
        Id-ul inexistent are prioritate: ProductNotFoundError înaintea oricărei erori de payload.
        """
        await self._delay("update")
        current = self._require(product_id)
        payload = data if isinstance(data, ProductUpdate) else ProductUpdate.model_validate(data)
        merged = current.model_dump()
        merged.update(payload.model_dump(exclude_unset=True))
        merged["id"] = current.id
        merged["created_at"] = current.created_at
        obj = Product.model_validate(merged)
        self.store.replace(current.id, obj)
        return _clone(obj)

    async def delete(self, product_id: ProductId) -> DeleteResult:
        await self._delay("delete")
        current = self._require(product_id)
        self.store.remove(current.id)
        return DeleteResult(success=True)


def get_product_service(store: CatalogStore = Depends(get_store)) -> ProductService:
    """FastAPI dependency: serviciu legat de store-ul aplicației."""
    return ProductService(store, latency_scale=settings.CATALOG_LATENCY_SCALE)


__all__ = [
    "BASE_DELAYS_MS",
    "ProductNotFoundError",
    "ProductService",
    "get_product_service",
]
