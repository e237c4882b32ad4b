import re
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from inventory_api.core.constants import DEFAULT_MINIMUM_STOCK, SKU_PATTERN
from inventory_api.schemas.common import CamelModel

_SKU_RE = re.compile(SKU_PATTERN)


def normalize_sku(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip().upper()
    if not value:
        raise ValueError("SKU is required")
    if not _SKU_RE.match(value):
        raise ValueError("SKU can only contain letters, numbers, hyphens, and underscores")
    return value


class ProductBase(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    sku: str = Field(max_length=50)
    quantity: int = Field(default=0, ge=0)
    price: float = Field(ge=0)
    supplier_id: int
    minimum_stock: int = Field(default=DEFAULT_MINIMUM_STOCK, ge=0)
    category: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)

    @field_validator("sku")
    @classmethod
    def _normalize_sku(cls, value):
        return normalize_sku(value)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(CamelModel):
    """PUT body: every field optional, only provided ones are written."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    sku: Optional[str] = Field(default=None, max_length=50)
    quantity: Optional[int] = Field(default=None, ge=0)
    price: Optional[float] = Field(default=None, ge=0)
    supplier_id: Optional[int] = None
    minimum_stock: Optional[int] = Field(default=None, ge=0)
    category: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)
    is_active: Optional[bool] = None

    @field_validator("sku")
    @classmethod
    def _normalize_sku(cls, value):
        return normalize_sku(value)


class SupplierSummary(CamelModel):
    id: int
    name: str
    email: str
    contact_person: Optional[str] = None


class ProductRead(CamelModel):
    id: int
    name: str
    sku: str
    quantity: int
    price: float
    minimum_stock: int
    supplier_id: Optional[int] = None
    supplier: Optional[SupplierSummary] = None
    category: Optional[str] = None
    description: Optional[str] = None
    is_active: bool
    stock_status: str
    total_value: float
    created_at: datetime
    updated_at: datetime


class ProductBrief(CamelModel):
    id: int
    name: str
    sku: str
    quantity: int
    price: float
    category: Optional[str] = None
