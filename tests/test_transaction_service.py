import unittest

from sqlalchemy import func, select

from inventory_api.core.errors import ConflictError, InsufficientStockError, NotFoundError
from inventory_api.models import Product, Transaction
from inventory_api.schemas.transaction import TransactionCreate, TransactionUpdate
from inventory_api.services import transaction_service
from tests.support import add_product, add_supplier, make_session_factory


class TransactionServiceTest(unittest.TestCase):
    def setUp(self):
        self.engine, Session = make_session_factory()
        self.db = Session()
        self.supplier = add_supplier(self.db)
        self.product = add_product(self.db, self.supplier, quantity=10, minimum_stock=5)

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def _record(self, transaction_type, quantity, unit_price=3.0, **extra):
        return transaction_service.create_transaction(
            self.db,
            TransactionCreate(
                product_id=self.product.id,
                type=transaction_type,
                quantity=quantity,
                unit_price=unit_price,
                **extra,
            ),
        )

    def _quantity(self):
        return self.db.execute(
            select(Product.quantity).where(Product.id == self.product.id)
        ).scalar_one()

    def _transaction_count(self):
        return self.db.execute(select(func.count(Transaction.id))).scalar_one()

    def test_purchase_increases_stock(self):
        self._record("PURCHASE", 15)
        self.assertEqual(self._quantity(), 25)

    def test_sale_decreases_stock_and_updates_status(self):
        self._record("SALE", 6)
        self.assertEqual(self._quantity(), 4)
        self.db.refresh(self.product)
        self.assertEqual(self.product.stock_status, "LOW_STOCK")

        self._record("SALE", 4)
        self.db.refresh(self.product)
        self.assertEqual(self.product.quantity, 0)
        self.assertEqual(self.product.stock_status, "OUT_OF_STOCK")

    def test_insufficient_stock_writes_nothing(self):
        with self.assertRaises(InsufficientStockError):
            self._record("SALE", 11)
        self.assertEqual(self._quantity(), 10)
        self.assertEqual(self._transaction_count(), 0)

    def test_adjustment_sets_quantity(self):
        self._record("ADJUSTMENT", 3)
        self.assertEqual(self._quantity(), 3)
        self._record("ADJUSTMENT", 0)
        self.assertEqual(self._quantity(), 0)

    def test_total_and_supplier_are_derived(self):
        transaction = self._record("PURCHASE", 4, unit_price=2.25)
        self.assertEqual(transaction.total, 9.0)
        self.assertEqual(transaction.supplier_id, self.supplier.id)
        self.assertEqual(transaction.status, "COMPLETED")

    def test_missing_product_fails_before_write(self):
        with self.assertRaises(ConflictError):
            transaction_service.create_transaction(
                self.db,
                TransactionCreate(product_id=999, type="PURCHASE", quantity=1, unit_price=1.0),
            )
        self.assertEqual(self._transaction_count(), 0)

    def test_deleting_completed_purchase_reverses_stock(self):
        transaction = self._record("PURCHASE", 5)
        self.assertEqual(self._quantity(), 15)
        transaction_service.delete_transaction(self.db, transaction.id)
        self.assertEqual(self._quantity(), 10)
        self.assertEqual(self._transaction_count(), 0)

    def test_purchase_reversal_clamps_at_zero(self):
        purchase = self._record("PURCHASE", 5)
        self._record("SALE", 13)
        self.assertEqual(self._quantity(), 2)
        transaction_service.delete_transaction(self.db, purchase.id)
        self.assertEqual(self._quantity(), 0)

    def test_deleting_completed_sale_restores_stock(self):
        sale = self._record("SALE", 7)
        transaction_service.delete_transaction(self.db, sale.id)
        self.assertEqual(self._quantity(), 10)

    def test_deleting_adjustment_leaves_stock(self):
        adjustment = self._record("ADJUSTMENT", 2)
        with self.assertLogs("inventory_api.services.transaction_service", level="WARNING"):
            transaction_service.delete_transaction(self.db, adjustment.id)
        self.assertEqual(self._quantity(), 2)

    def test_deleting_pending_transaction_keeps_stock(self):
        pending = self._record("PURCHASE", 5, status="PENDING")
        self.assertEqual(self._quantity(), 15)
        transaction_service.delete_transaction(self.db, pending.id)
        self.assertEqual(self._quantity(), 15)

    def test_delete_missing_transaction(self):
        with self.assertRaises(NotFoundError):
            transaction_service.delete_transaction(self.db, 404)

    def test_completed_quantity_is_immutable(self):
        transaction = self._record("PURCHASE", 5)
        with self.assertRaises(ConflictError):
            transaction_service.update_transaction(
                self.db, transaction.id, TransactionUpdate(quantity=8)
            )

    def test_completed_quantity_cannot_be_zeroed(self):
        purchase = self._record("PURCHASE", 5)
        self.assertEqual(self._quantity(), 15)
        with self.assertRaises(ConflictError) as ctx:
            transaction_service.update_transaction(
                self.db, purchase.id, TransactionUpdate(quantity=0)
            )
        self.assertEqual(ctx.exception.message, "Cannot modify quantity of completed transaction")

        transaction_service.delete_transaction(self.db, purchase.id)
        self.assertEqual(self._quantity(), 10)

    def test_pending_movement_keeps_quantity_of_at_least_one(self):
        sale = self._record("SALE", 2, status="PENDING")
        with self.assertRaises(ConflictError) as ctx:
            transaction_service.update_transaction(
                self.db, sale.id, TransactionUpdate(quantity=0)
            )
        self.assertEqual(ctx.exception.message, "Quantity must be at least 1")
        self.db.refresh(sale)
        self.assertEqual(sale.quantity, 2)

        updated = transaction_service.update_transaction(
            self.db, sale.id, TransactionUpdate(quantity=3)
        )
        self.assertEqual((updated.quantity, updated.total), (3, 9.0))

    def test_pending_adjustment_may_target_zero(self):
        adjustment = self._record("ADJUSTMENT", 4, status="PENDING")
        updated = transaction_service.update_transaction(
            self.db, adjustment.id, TransactionUpdate(quantity=0)
        )
        self.assertEqual(updated.quantity, 0)

    def test_update_recomputes_total(self):
        transaction = self._record("PURCHASE", 4, unit_price=1.0)
        updated = transaction_service.update_transaction(
            self.db,
            transaction.id,
            TransactionUpdate(unit_price=2.5, notes="repriced"),
        )
        self.assertEqual(updated.total, 10.0)
        self.assertEqual(updated.notes, "repriced")
        self.assertEqual(self._quantity(), 14)

    def test_list_filters_by_type(self):
        self._record("PURCHASE", 1)
        self._record("SALE", 1)
        self._record("SALE", 2)
        sales, total = transaction_service.list_transactions(self.db, transaction_type="SALE")
        self.assertEqual(total, 2)
        self.assertTrue(all(item.type == "SALE" for item in sales))

    def test_summary_groups_by_type(self):
        self._record("PURCHASE", 10, unit_price=1.0)
        self._record("SALE", 4, unit_price=2.0)
        self._record("SALE", 1, unit_price=2.0)

        report = transaction_service.transaction_summary(self.db)
        by_type = {row["type"]: row for row in report["summary"]}
        self.assertEqual(by_type["SALE"]["count"], 2)
        self.assertEqual(by_type["SALE"]["totalQuantity"], 5)
        self.assertEqual(by_type["SALE"]["totalValue"], 10.0)
        self.assertEqual(by_type["PURCHASE"]["totalValue"], 10.0)
        self.assertEqual(len(report["topProducts"]), 1)
        self.assertEqual(report["topProducts"][0]["transactionCount"], 3)
        self.assertEqual(report["topProducts"][0]["productSku"], "WID-001")
        self.assertTrue(report["dailyTrends"])


if __name__ == "__main__":
    unittest.main()
