from sqlalchemy.orm import sessionmaker

from inventory_api.database.base import Base
from inventory_api.database.engine import build_engine
from inventory_api.models import Product, Supplier, import_all_models


def make_session_factory():
    import_all_models()
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    return engine, sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def add_supplier(db, email="buyer@supplies.com", **overrides):
    values = dict(
        name="Supplies Co",
        email=email,
        phone="+15550001111",
        street="1 Main Street",
        city="Springfield",
        country="USA",
    )
    values.update(overrides)
    supplier = Supplier(**values)
    db.add(supplier)
    db.commit()
    return supplier


def add_product(db, supplier, sku="WID-001", quantity=10, minimum_stock=5, **overrides):
    values = dict(
        name="Widget",
        sku=sku,
        quantity=quantity,
        minimum_stock=minimum_stock,
        price=2.5,
        category="Hardware",
        supplier_id=supplier.id,
    )
    values.update(overrides)
    product = Product(**values)
    db.add(product)
    db.commit()
    return product
