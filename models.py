from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Product(BaseModel):
    # A catalog item as persisted by the scraper
    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    img_url: str = ""
    price: float = Field(ge=0.0)
    savings: float = Field(default=0.0, ge=0.0)

    @field_validator("name", "url")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class PricedProduct(BaseModel):
    """
    A loaded record: a Product plus its discount percentage.

    Scraped records are stored flat, with the product fields and `percentage`
    side by side. The before-validator nests the product fields so both the
    flat and the nested shape validate.
    """

    model_config = ConfigDict(frozen=True)

    product: Product
    percentage: float = Field(default=0.0, ge=0.0)

    @model_validator(mode="before")
    @classmethod
    def _nest_flat_record(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "product" in data:
            return data
        payload = dict(data)
        nested: dict[str, Any] = {}
        if "percentage" in payload:
            nested["percentage"] = payload.pop("percentage")
        nested["product"] = payload
        return nested

    @field_validator("percentage", mode="before")
    @classmethod
    def _default_missing_percentage(cls, v: object) -> object:
        # Scrapers write null when a product has no discount badge
        if v is None:
            return 0.0
        if isinstance(v, bool):
            raise ValueError("percentage must be a number, not a boolean")
        return v

    @property
    def discounted(self) -> bool:
        return self.percentage > 0


class BaseContext(BaseModel):
    """Context shared by every page: the link prefix for subpath hosting."""

    model_config = ConfigDict(frozen=True)

    path_prefix: str = ""


class DealzContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: BaseContext
    title: str
    last_updated: datetime
    products: tuple[Product, ...] = ()

    @property
    def path_prefix(self) -> str:
        return self.base.path_prefix
