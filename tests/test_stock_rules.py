import unittest

from inventory_api.core.errors import InsufficientStockError
from inventory_api.core.stock_rules import (
    apply_transaction,
    reverse_transaction,
    stock_status,
    transaction_total,
)


class ApplyTransactionTest(unittest.TestCase):
    def test_purchase_adds_quantity(self):
        for current, quantity in ((0, 1), (10, 5), (3, 100)):
            with self.subTest(current=current, quantity=quantity):
                self.assertEqual(apply_transaction(current, "PURCHASE", quantity), current + quantity)

    def test_sale_subtracts_quantity(self):
        self.assertEqual(apply_transaction(10, "SALE", 6), 4)

    def test_sale_of_exact_remaining_stock_leaves_zero(self):
        self.assertEqual(apply_transaction(4, "SALE", 4), 0)

    def test_sale_larger_than_stock_fails(self):
        with self.assertRaises(InsufficientStockError) as ctx:
            apply_transaction(4, "SALE", 5)
        self.assertEqual(ctx.exception.available, 4)
        self.assertEqual(ctx.exception.requested, 5)
        self.assertEqual(str(ctx.exception), "Insufficient stock. Available: 4, Requested: 5")

    def test_adjustment_sets_absolute_quantity(self):
        cases = [(10, 3, 3), (0, 25, 25), (7, 0, 0), (7, -4, 0)]
        for current, target, expected in cases:
            with self.subTest(current=current, target=target):
                self.assertEqual(apply_transaction(current, "ADJUSTMENT", target), expected)

    def test_unknown_type_is_rejected(self):
        with self.assertRaises(ValueError):
            apply_transaction(1, "TRANSFER", 1)


class ReverseTransactionTest(unittest.TestCase):
    def test_purchase_reversal_subtracts_and_clamps(self):
        self.assertEqual(reverse_transaction(10, "PURCHASE", 4), 6)
        self.assertEqual(reverse_transaction(2, "PURCHASE", 5), 0)

    def test_sale_reversal_adds_back(self):
        self.assertEqual(reverse_transaction(0, "SALE", 4), 4)

    def test_adjustment_has_no_reversal(self):
        self.assertIsNone(reverse_transaction(9, "ADJUSTMENT", 3))


class StockStatusTest(unittest.TestCase):
    def test_boundaries(self):
        cases = [
            (0, 5, "OUT_OF_STOCK"),
            (1, 5, "LOW_STOCK"),
            (5, 5, "LOW_STOCK"),
            (6, 5, "IN_STOCK"),
            (0, 0, "OUT_OF_STOCK"),
            (1, 0, "IN_STOCK"),
        ]
        for quantity, minimum, expected in cases:
            with self.subTest(quantity=quantity, minimum=minimum):
                self.assertEqual(stock_status(quantity, minimum), expected)

    def test_sales_walk_through_statuses(self):
        quantity = 10
        self.assertEqual(stock_status(quantity, 5), "IN_STOCK")
        quantity = apply_transaction(quantity, "SALE", 6)
        self.assertEqual((quantity, stock_status(quantity, 5)), (4, "LOW_STOCK"))
        quantity = apply_transaction(quantity, "SALE", 4)
        self.assertEqual((quantity, stock_status(quantity, 5)), (0, "OUT_OF_STOCK"))
        with self.assertRaises(InsufficientStockError):
            apply_transaction(quantity, "SALE", 1)


class TransactionTotalTest(unittest.TestCase):
    def test_total_is_quantity_times_unit_price(self):
        self.assertEqual(transaction_total(3, 2.5), 7.5)
        self.assertEqual(transaction_total(0, 9.99), 0.0)


if __name__ == "__main__":
    unittest.main()
