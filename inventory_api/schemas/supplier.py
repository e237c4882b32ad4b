import re
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import EmailStr, Field, field_validator

from inventory_api.core.constants import DEFAULT_COUNTRY, DEFAULT_RATING, PHONE_PATTERN
from inventory_api.schemas.common import CamelModel
from inventory_api.schemas.product import ProductBrief

PaymentTerms = Literal["NET_30", "NET_60", "NET_90", "COD", "PREPAID"]

_PHONE_RE = re.compile(PHONE_PATTERN)


def normalize_email(value: Optional[str]) -> Optional[str]:
    # EmailStr keeps the local part's case; addresses are stored lowercased.
    if value is None:
        return None
    return value.lower()


def validate_phone(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not _PHONE_RE.match(value):
        raise ValueError("Valid phone number is required")
    return value


class Address(CamelModel):
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: str = Field(default=DEFAULT_COUNTRY, min_length=1)


class SupplierBase(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str
    address: Address
    contact_person: Optional[str] = Field(default=None, max_length=100)
    payment_terms: PaymentTerms = "NET_30"
    rating: int = Field(default=DEFAULT_RATING, ge=1, le=5)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value):
        return normalize_email(value)

    @field_validator("phone")
    @classmethod
    def _validate_phone(cls, value):
        return validate_phone(value)


class SupplierCreate(SupplierBase):
    active_status: bool = True


class SupplierUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    contact_person: Optional[str] = Field(default=None, max_length=100)
    payment_terms: Optional[PaymentTerms] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    active_status: Optional[bool] = None

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value):
        return normalize_email(value)

    @field_validator("phone")
    @classmethod
    def _validate_phone(cls, value):
        return validate_phone(value)


class SupplierRead(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    address: Address
    full_address: str
    contact_person: Optional[str] = None
    active_status: bool
    payment_terms: str
    rating: int
    created_at: datetime
    updated_at: datetime


class SupplierListItem(SupplierRead):
    product_count: int = 0


class SupplierWithProducts(SupplierRead):
    products: List[ProductBrief] = Field(default_factory=list)
