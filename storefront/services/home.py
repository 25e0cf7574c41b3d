# storefront/services/home.py
from __future__ import annotations

import asyncio
from typing import Sequence

from storefront.schemas.product import CategoryCount, HomePage
from storefront.services.product_service import ProductService

STOREFRONT_CATEGORIES: tuple[str, ...] = (
    "Action Figures & Playsets",
    "Dolls & Accessories",
    "Board Games & Puzzles",
    "Educational & STEM Toys",
    "Building & Construction",
    "Arts & Crafts",
    "Outdoor & Sports",
    "Electronic & Interactive",
)


async def build_home(
    service: ProductService,
    *,
    featured_limit: int = 8,
    categories: Sequence[str] = STOREFRONT_CATEGORIES,
) -> HomePage:
    """
    Pagina principală: primele `featured_limit` produse recomandate + câte produse
    are fiecare categorie din vitrină (potrivire exactă pe nume).
    Cele două citiri rulează concurent.
    """
    featured, all_products = await asyncio.gather(service.get_featured(), service.get_all())
    counts = [
        CategoryCount(name=c, count=sum(1 for p in all_products if p.category == c))
        for c in categories
    ]
    return HomePage(featured=featured[:featured_limit], categories=counts)
