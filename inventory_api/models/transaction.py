from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from inventory_api.core.constants import DEFAULT_TRANSACTION_STATUS
from inventory_api.database.base import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.id", ondelete="SET NULL"))

    type = Column(String(20), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False)
    total = Column(Float, nullable=False, default=0)

    reference = Column(String(100))
    notes = Column(String(500))
    status = Column(String(20), nullable=False, default=DEFAULT_TRANSACTION_STATUS)

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

    product = relationship("Product", lazy="joined")
    supplier = relationship("Supplier", lazy="joined")

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_transactions_quantity"),
        CheckConstraint("unit_price >= 0", name="ck_transactions_unit_price"),
        Index("idx_transactions_product", "product_id"),
        Index("idx_transactions_type", "type"),
        Index("idx_transactions_created", "created_at"),
        Index("idx_transactions_supplier", "supplier_id"),
    )


__all__ = ["Transaction"]
