from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Index, Integer, String

from inventory_api.core.constants import DEFAULT_COUNTRY, DEFAULT_PAYMENT_TERMS, DEFAULT_RATING
from inventory_api.database.base import Base


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True)

    name = Column(String(100), nullable=False)
    email = Column(String, nullable=False, unique=True)
    phone = Column(String(20), nullable=False)
    contact_person = Column(String(100))

    street = Column(String, nullable=False)
    city = Column(String, nullable=False)
    state = Column(String)
    zip_code = Column(String)
    country = Column(String, nullable=False, default=DEFAULT_COUNTRY)

    active_status = Column(Boolean, nullable=False, default=True)
    payment_terms = Column(String(10), nullable=False, default=DEFAULT_PAYMENT_TERMS)
    rating = Column(Integer, nullable=False, default=DEFAULT_RATING)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_suppliers_rating"),
        Index("idx_suppliers_active", "active_status"),
    )

    @property
    def address(self) -> dict:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
            "country": self.country,
        }

    @property
    def full_address(self) -> str:
        text = "{}, {}".format(self.street, self.city)
        if self.state:
            text += ", {}".format(self.state)
        if self.zip_code:
            text += " {}".format(self.zip_code)
        return "{}, {}".format(text, self.country)


__all__ = ["Supplier"]
