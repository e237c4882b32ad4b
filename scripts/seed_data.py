import argparse

from sqlalchemy import delete, select

from inventory_api.core.logging import setup_logging
from inventory_api.database import SessionLocal, init_db
from inventory_api.models.product import Product
from inventory_api.models.supplier import Supplier
from inventory_api.models.transaction import Transaction
from inventory_api.schemas.transaction import TransactionCreate
from inventory_api.services.transaction_service import create_transaction


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample inventory data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    init_db()

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(Transaction))
            db.execute(delete(Product))
            db.execute(delete(Supplier))
            db.commit()

        has_supplier = db.execute(select(Supplier.id).limit(1)).first()
        if has_supplier:
            print("Seed skipped: suppliers already exist.")
            return

        suppliers = [
            Supplier(
                name="Northwind Components",
                email="orders@northwind.com",
                phone="+15551230001",
                contact_person="Dana Reyes",
                street="12 Harbor Road",
                city="Seattle",
                state="WA",
                zip_code="98101",
                country="USA",
                payment_terms="NET_30",
                rating=4,
            ),
            Supplier(
                name="Acme Office Supply",
                email="sales@acme.com",
                phone="+15551230002",
                contact_person="Lee Park",
                street="400 Market Street",
                city="Denver",
                country="USA",
                payment_terms="NET_60",
                rating=3,
            ),
        ]
        db.add_all(suppliers)
        db.flush()

        products = [
            Product(
                name="USB-C Cable 1m",
                sku="CBL-USBC-1M",
                category="Electronics",
                quantity=0,
                price=7.5,
                minimum_stock=25,
                supplier_id=suppliers[0].id,
            ),
            Product(
                name="Wireless Mouse",
                sku="MSE-WL-01",
                category="Electronics",
                quantity=0,
                price=19.99,
                minimum_stock=10,
                supplier_id=suppliers[0].id,
            ),
            Product(
                name="A4 Copy Paper (500)",
                sku="PPR-A4-500",
                category="Office",
                quantity=0,
                price=4.25,
                minimum_stock=40,
                supplier_id=suppliers[1].id,
            ),
        ]
        db.add_all(products)
        db.commit()

        movements = [
            (products[0], "PURCHASE", 120, 4.1),
            (products[0], "SALE", 35, 7.5),
            (products[1], "PURCHASE", 30, 11.0),
            (products[1], "SALE", 24, 19.99),
            (products[2], "PURCHASE", 60, 2.8),
            (products[2], "ADJUSTMENT", 55, 2.8),
        ]
        for product, transaction_type, quantity, unit_price in movements:
            create_transaction(
                db,
                TransactionCreate(
                    product_id=product.id,
                    type=transaction_type,
                    quantity=quantity,
                    unit_price=unit_price,
                    reference="SEED",
                ),
            )
        print("Seed data created.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
