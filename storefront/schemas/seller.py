# storefront/schemas/seller.py
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from storefront.utils import parse_decimal_prefix, parse_int_prefix


class DimensionsForm(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    length: Decimal
    width: Decimal
    height: Decimal

    @field_validator("length", "width", "height", mode="before")
    @classmethod
    def _parse_float(cls, v: Any) -> Decimal:
        parsed = parse_decimal_prefix(v)
        if parsed is None:
            raise ValueError("must start with a number")
        return parsed


class SellerProductForm(BaseModel):
    """
    Formularul din dashboard-ul vânzătorului: valorile numerice vin ca text.

    - price/weight/dimensions: prefix zecimal ("12.5 lei" -> 12.5)
    - ageMin/ageMax/stockQuantity: prefix întreg ("3 ani" -> 3)
    - salePrice nu apare în formular: la salvare e mereu resetat la null.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str = Field(..., min_length=1)
    brand: str = ""
    description: str = ""
    category: str = ""
    subcategory: str = ""
    material: str = ""
    price: Decimal
    weight: Decimal
    age_min: int
    age_max: int
    stock_quantity: int
    images: List[str] = Field(default_factory=list)
    is_featured: bool = False
    dimensions: DimensionsForm

    @field_validator("name")
    @classmethod
    def _name_strip_nonempty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v

    @field_validator("price", "weight", mode="before")
    @classmethod
    def _parse_float(cls, v: Any) -> Decimal:
        parsed = parse_decimal_prefix(v)
        if parsed is None:
            raise ValueError("must start with a number")
        return parsed

    @field_validator("age_min", "age_max", "stock_quantity", mode="before")
    @classmethod
    def _parse_int(cls, v: Any) -> int:
        parsed = parse_int_prefix(v)
        if parsed is None:
            raise ValueError("must start with an integer")
        return parsed

    @field_validator("images", mode="before")
    @classmethod
    def _images_drop_blank(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [s.strip() for s in v if isinstance(s, str) and s.strip()]
        return v

    def to_product_payload(self, seller_id: Optional[str]) -> Dict[str, Any]:
        """Payload complet pentru ProductService.create/update."""
        payload = self.model_dump()
        payload["seller_id"] = seller_id
        payload["sale_price"] = None
        return payload
