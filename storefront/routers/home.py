# storefront/routers/home.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.core.settings import settings
from storefront.schemas.product import HomePage
from storefront.services.home import build_home
from storefront.services.product_service import ProductService, get_product_service

router = APIRouter(tags=["storefront"])


@router.get("/home", response_model=HomePage, summary="Featured products and category counts")
async def home(service: ProductService = Depends(get_product_service)):
    return await build_home(service, featured_limit=settings.HOME_FEATURED_LIMIT)
