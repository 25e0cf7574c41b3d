# storefront/routers/product.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from storefront.schemas.product import (
    DeleteResult,
    Product,
    ProductCreate,
    ProductUpdate,
)
from storefront.services.product_service import (
    ProductNotFoundError,
    ProductService,
    get_product_service,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get(
    "",
    response_model=List[Product],
    summary="List products, optionally by exact category or free-text search",
)
async def list_products(
    response: Response,
    category: str | None = Query(
        default=None,
        description="Exact (case-sensitive) category name",
    ),
    q: str | None = Query(
        default=None,
        description="Substring (case-insensitive) in name, brand, description or category",
    ),
    service: ProductService = Depends(get_product_service),
):
    """
    - fără parametri: toate produsele, în ordinea din store
    - `category`: potrivire exactă
    - `q`: căutare; combinat cu `category`, restrânge rezultatele căutării la acea categorie
    """
    if q is not None:
        items = await service.search(q)
        if category is not None:
            items = [p for p in items if p.category == category]
    elif category is not None:
        items = await service.get_by_category(category)
    else:
        items = await service.get_all()
    # Header util pentru UI-uri/tabele
    response.headers["X-Total-Count"] = str(len(items))
    return items


@router.get("/featured", response_model=List[Product], summary="Featured products")
async def list_featured(response: Response, service: ProductService = Depends(get_product_service)):
    items = await service.get_featured()
    response.headers["X-Total-Count"] = str(len(items))
    return items


@router.get("/deals", response_model=List[Product], summary="Products with a sale price")
async def list_deals(response: Response, service: ProductService = Depends(get_product_service)):
    items = await service.get_deals()
    response.headers["X-Total-Count"] = str(len(items))
    return items


@router.get(
    "/{product_id}",
    response_model=Product,
    summary="Get a product by id",
)
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    # product_id rămâne text: serviciul îl normalizează ("4", "4abc" -> 4)
    try:
        return await service.get_by_id(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
async def create_product(payload: ProductCreate, service: ProductService = Depends(get_product_service)):
    return await service.create(payload)


@router.put(
    "/{product_id}",
    response_model=Product,
    summary="Update a product (only the provided fields change)",
)
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    try:
        return await service.update(product_id, payload)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/{product_id}",
    response_model=DeleteResult,
    summary="Delete a product",
)
async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    try:
        return await service.delete(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
