from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import relationship

from inventory_api.core.constants import DEFAULT_MINIMUM_STOCK
from inventory_api.core.stock_rules import stock_status
from inventory_api.database.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)

    name = Column(String(100), nullable=False)
    sku = Column(String(50), nullable=False, unique=True)
    category = Column(String(50))
    description = Column(String(500))

    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False)
    minimum_stock = Column(Integer, nullable=False, default=DEFAULT_MINIMUM_STOCK)

    # Nullable at the storage level so a supplier row can be removed while
    # inactive products still point at it.
    supplier_id = Column(Integer, ForeignKey("suppliers.id", ondelete="SET NULL"))
    is_active = Column(Boolean, nullable=False, default=True)

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

    supplier = relationship("Supplier", lazy="joined")

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity"),
        CheckConstraint("price >= 0", name="ck_products_price"),
        CheckConstraint("minimum_stock >= 0", name="ck_products_minimum_stock"),
        Index("idx_products_supplier", "supplier_id"),
        Index("idx_products_category", "category"),
    )

    @property
    def stock_status(self) -> str:
        return stock_status(self.quantity, self.minimum_stock)

    @property
    def total_value(self) -> float:
        return (self.quantity or 0) * (self.price or 0.0)


__all__ = ["Product"]
