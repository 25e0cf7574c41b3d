# storefront/schemas/product.py
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# JSON-ul catalogului e camelCase (salePrice, ageMin, ...); în Python folosim snake_case.
_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Dimensions(BaseModel):
    model_config = _CAMEL

    length: Decimal = Decimal("0")
    width: Decimal = Decimal("0")
    height: Decimal = Decimal("0")


class ProductFields(BaseModel):
    """
    Câmpurile editabile ale unui produs.

    Nu validăm intervale (preț negativ, age_min > age_max, sale_price >= price):
    validarea e responsabilitatea formularului care apelează catalogul.

    Prețurile (price, sale_price, weight) sunt Decimal, nu float: compară cu
    Decimal("9.99"); `Decimal("9.99") == 9.99` e False, `float(p.price) == 9.99` e True.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "name": "Rainbow Stacking Rings",
                    "brand": "TinyHands",
                    "description": "Seven wooden rings in bright colors",
                    "category": "Educational & STEM Toys",
                    "subcategory": "Stacking",
                    "material": "Wood",
                    "price": "19.99",
                    "salePrice": None,
                    "ageMin": 1,
                    "ageMax": 3,
                    "weight": "0.4",
                    "dimensions": {"length": "12", "width": "12", "height": "20"},
                    "stockQuantity": 40,
                    "images": [],
                    "isFeatured": False,
                }
            ]
        },
    )

    name: str
    brand: str = ""
    description: str = ""
    category: str = ""
    subcategory: str = ""
    material: str = ""
    price: Decimal
    sale_price: Optional[Decimal] = None
    age_min: int = 0
    age_max: int = 0
    weight: Decimal = Decimal("0")
    dimensions: Dimensions = Field(default_factory=Dimensions)
    stock_quantity: int = 0
    images: List[str] = Field(default_factory=list)
    is_featured: bool = False
    seller_id: Optional[str] = None


class ProductCreate(ProductFields):
    """Payload pentru creare; id/rating/reviewCount/createdAt trimise de apelant sunt ignorate."""
    pass


class ProductUpdate(BaseModel):
    """Payload pentru update; toate câmpurile sunt opționale (merge superficial)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    brand: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    material: Optional[str] = None
    price: Optional[Decimal] = None
    sale_price: Optional[Decimal] = None
    age_min: Optional[int] = None
    age_max: Optional[int] = None
    weight: Optional[Decimal] = None
    dimensions: Optional[Dimensions] = None
    stock_quantity: Optional[int] = None
    images: Optional[List[str]] = None
    is_featured: Optional[bool] = None
    seller_id: Optional[str] = None


class Product(ProductFields):
    """Înregistrarea completă, așa cum o ține store-ul."""
    id: int
    rating: Decimal = Decimal("0")
    review_count: int = 0
    created_at: datetime

    def __repr__(self) -> str:
        # scurtează numele în repr pentru loguri mai curate
        name_preview = (self.name[:32] + "…") if self.name and len(self.name) > 33 else self.name
        return f"<Product id={self.id!r} name={name_preview!r} category={self.category!r}>"


class SeedProduct(Product):
    """
    Înregistrare din seed, citită tolerant: câmpurile lipsă primesc valori implicite
    (name "", price 0, createdAt = momentul încărcării), iar id-ul poate lipsi.
    """
    name: str = ""
    price: Decimal = Decimal("0")
    id: Optional[int] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DeleteResult(BaseModel):
    success: bool = True


class CategoryCount(BaseModel):
    name: str
    count: int


class HomePage(BaseModel):
    """Răspuns pentru pagina principală: produse recomandate + numărători pe categorii."""
    featured: List[Product]
    categories: List[CategoryCount]
