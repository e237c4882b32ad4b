from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, ValidationInfo, field_validator

from inventory_api.schemas.common import CamelModel

TransactionType = Literal["PURCHASE", "SALE", "ADJUSTMENT"]
TransactionStatus = Literal["PENDING", "COMPLETED", "CANCELLED"]


class TransactionCreate(CamelModel):
    product_id: int
    type: TransactionType
    quantity: int = Field(ge=0)
    unit_price: float = Field(ge=0)
    reference: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=500)
    status: TransactionStatus = "COMPLETED"

    @field_validator("quantity")
    @classmethod
    def _movement_needs_quantity(cls, value, info: ValidationInfo):
        # ADJUSTMENT sets an absolute level, so zero is a valid target.
        if info.data.get("type") in ("PURCHASE", "SALE") and value < 1:
            raise ValueError("Quantity must be at least 1")
        return value


class TransactionUpdate(CamelModel):
    quantity: Optional[int] = Field(default=None, ge=0)
    unit_price: Optional[float] = Field(default=None, ge=0)
    reference: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=500)
    status: Optional[TransactionStatus] = None


class ProductSummary(CamelModel):
    id: int
    name: str
    sku: str
    category: Optional[str] = None


class SupplierRef(CamelModel):
    id: int
    name: str
    email: str


class TransactionRead(CamelModel):
    id: int
    product_id: int
    product: Optional[ProductSummary] = None
    type: str
    quantity: int
    unit_price: float
    total: float
    reference: Optional[str] = None
    notes: Optional[str] = None
    supplier_id: Optional[int] = None
    supplier: Optional[SupplierRef] = None
    status: str
    created_at: datetime
    updated_at: datetime
