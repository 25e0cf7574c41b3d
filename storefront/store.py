# storefront/store.py
from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

from fastapi import Request

from storefront.schemas.product import Product, SeedProduct


def load_seed(path: str | Path) -> List[Product]:
    """
    Citește setul static de produse (JSON array, chei camelCase).
    Numerele zecimale sunt parsate direct ca Decimal ca să nu pierdem precizie.
    Înregistrările incomplete sunt acceptate (vezi SeedProduct); cele fără id
    primesc id-uri consecutive după cel mai mare id din fișier.
    """
    with open(path, encoding="utf-8") as fh:
        raw = json.load(fh, parse_float=Decimal)
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON array of products.")
    seeded = [SeedProduct.model_validate(item) for item in raw]
    next_id = max((s.id for s in seeded if s.id is not None), default=0) + 1
    products: List[Product] = []
    for s in seeded:
        data = s.model_dump()
        if data["id"] is None:
            data["id"] = next_id
            next_id += 1
        products.append(Product.model_validate(data))
    return products


class CatalogStore:
    """
    Colecția autoritară de produse pentru durata procesului.

    - Ordinea e ordinea de inserare; nicio operație nu reordonează înregistrările existente.
    - Store-ul e intern: copiile la granița cu apelanții le face ProductService.
    - `_last_issued_id` reține cel mai mare id emis vreodată, ca un id să nu fie refolosit
      după ștergerea produsului cu id maxim.
    """

    def __init__(self, records: Iterable[Product] = ()) -> None:
        self._records: List[Product] = [r.model_copy(deep=True) for r in records]
        self._last_issued_id = max((r.id for r in self._records), default=0)

    @classmethod
    def from_seed_file(cls, path: str | Path) -> "CatalogStore":
        return cls(load_seed(path))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._records)

    def filter(self, predicate: Callable[[Product], bool]) -> List[Product]:
        return [p for p in self._records if predicate(p)]

    def _index_of(self, product_id: int) -> Optional[int]:
        for i, p in enumerate(self._records):
            if p.id == product_id:
                return i
        return None

    def get(self, product_id: int) -> Optional[Product]:
        idx = self._index_of(product_id)
        return None if idx is None else self._records[idx]

    def next_id(self) -> int:
        current_max = max((p.id for p in self._records), default=0)
        return max(current_max, self._last_issued_id) + 1

    def add(self, product: Product) -> Product:
        self._records.append(product)
        self._last_issued_id = max(self._last_issued_id, product.id)
        return product

    def replace(self, product_id: int, product: Product) -> bool:
        """Înlocuiește pe loc (păstrează poziția). Returnează False dacă id-ul lipsește."""
        idx = self._index_of(product_id)
        if idx is None:
            return False
        self._records[idx] = product
        return True

    def remove(self, product_id: int) -> bool:
        idx = self._index_of(product_id)
        if idx is None:
            return False
        del self._records[idx]
        return True


def get_store(request: Request) -> CatalogStore:
    """FastAPI dependency: store-ul construit o singură dată în lifespan."""
    return request.app.state.store


__all__ = [
    "CatalogStore",
    "load_seed",
    "get_store",
]
