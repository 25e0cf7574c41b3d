from __future__ import annotations
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_PATH = Path(__file__).resolve().parent.parent / "data" / "products.json"


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field("dev")

    # Catalog
    CATALOG_SEED_PATH: Optional[str] = Field(None, description="JSON array cu produsele inițiale")
    # 1.0 = latențe de 200-400ms per operație; 0 = fără întârziere
    CATALOG_LATENCY_SCALE: float = Field(1.0, ge=0)

    # Storefront / seller
    HOME_FEATURED_LIMIT: int = Field(8, ge=0)
    SELLER_ID: str = "seller1"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def seed_path(self) -> Path:
        return Path(self.CATALOG_SEED_PATH) if self.CATALOG_SEED_PATH else DEFAULT_SEED_PATH


settings = Settings()
