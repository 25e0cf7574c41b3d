# storefront/routers/seller.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from storefront.core.settings import settings
from storefront.schemas.product import DeleteResult, Product
from storefront.schemas.seller import SellerProductForm
from storefront.services.product_service import (
    ProductNotFoundError,
    ProductService,
    get_product_service,
)

router = APIRouter(prefix="/seller", tags=["seller"])


@router.get(
    "/products",
    response_model=List[Product],
    summary="Seller dashboard: all products",
)
async def list_seller_products(response: Response, service: ProductService = Depends(get_product_service)):
    items = await service.get_all()
    response.headers["X-Total-Count"] = str(len(items))
    return items


@router.post(
    "/products",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Seller dashboard: add product from form values",
)
async def create_seller_product(form: SellerProductForm, service: ProductService = Depends(get_product_service)):
    return await service.create(form.to_product_payload(settings.SELLER_ID))


@router.put(
    "/products/{product_id}",
    response_model=Product,
    summary="Seller dashboard: save edited product (resets sale price)",
)
async def update_seller_product(
    product_id: str,
    form: SellerProductForm,
    service: ProductService = Depends(get_product_service),
):
    try:
        return await service.update(product_id, form.to_product_payload(settings.SELLER_ID))
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/products/{product_id}",
    response_model=DeleteResult,
    summary="Seller dashboard: delete product",
)
async def delete_seller_product(product_id: str, service: ProductService = Depends(get_product_service)):
    try:
        return await service.delete(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
