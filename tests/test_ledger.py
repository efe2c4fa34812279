#!/usr/bin/env python3
"""
Test Suite for the sales ledger

PURPOSE:
    Verifies sale totals from discounted prices, frozen line prices, unguarded
    stock decrements, skipped unknown items and the "today" window.

USAGE:
    Run from project root: python -m pytest tests/test_ledger.py -v
"""

import unittest
from datetime import datetime, timedelta

from store_fixtures import build_store, make_session_factory, sell

from backend.data import catalog, ledger, models
from backend.schemas.sales_models import SaleLine


class TestCreateSale(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()
        self.branch, self.items = build_store(self.db)

    def tearDown(self):
        self.db.close()

    def test_total_uses_discounted_price(self):
        rice = self.items["Basmati Rice"]
        sale = sell(self.db, self.branch, (rice, 3))
        self.assertAlmostEqual(sale.total_amount, 270.00)
        self.assertEqual(sale.items_count, 1)
        self.assertEqual(len(sale.items), 1)
        self.assertAlmostEqual(sale.items[0].price_at_sale, 90.00)
        self.assertEqual(catalog.get_item(self.db, rice.id).stock, 97)

    def test_mixed_lines(self):
        sale = sell(self.db, self.branch, (self.items["Kurkure"], 2), (self.items["Tomato"], 4))
        # 2 x 20.00 + 4 x 20.00
        self.assertAlmostEqual(sale.total_amount, 120.00)
        self.assertEqual([line.quantity for line in sale.items], [2, 4])

    def test_line_price_is_frozen(self):
        rice = self.items["Basmati Rice"]
        sale = sell(self.db, self.branch, (rice, 1))
        catalog.update_item(self.db, rice.id, {"price": 500.0, "discount": 0})
        self.db.expire_all()
        line = self.db.query(models.SaleItem).filter(models.SaleItem.sale_id == sale.id).one()
        self.assertAlmostEqual(line.price_at_sale, 90.00)
        self.assertAlmostEqual(self.db.get(models.Sale, sale.id).total_amount, 90.00)

    def test_stock_can_go_negative(self):
        dairy_milk = self.items["Dairy Milk"]
        sell(self.db, self.branch, (dairy_milk, 7))
        self.assertEqual(catalog.get_item(self.db, dairy_milk.id).stock, -2)

    def test_unknown_items_are_skipped_but_counted(self):
        lines = [SaleLine(item_id=self.items["Kurkure"].id, quantity=1), SaleLine(item_id=9999, quantity=2)]
        sale = ledger.create_sale(self.db, self.branch.id, None, lines)
        self.assertEqual(sale.items_count, 2)
        self.assertEqual(len(sale.items), 1)
        self.assertAlmostEqual(sale.total_amount, 20.00)

    def test_anonymous_sale(self):
        sale = sell(self.db, self.branch, (self.items["Salt"], 1))
        self.assertIsNone(sale.user_id)

    def test_sale_records_user(self):
        user = catalog.login(self.db, "9876543210")
        sale = sell(self.db, self.branch, (self.items["Salt"], 1), user=user)
        self.assertEqual(sale.user_id, user.id)


class TestToday(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()
        self.branch, self.items = build_store(self.db)

    def tearDown(self):
        self.db.close()

    def test_start_of_today_is_local_midnight(self):
        now = datetime(2024, 5, 17, 15, 42, 10)
        self.assertEqual(ledger.start_of_today(now), datetime(2024, 5, 17))

    def test_today_sales_excludes_earlier_days(self):
        old = sell(self.db, self.branch, (self.items["Kurkure"], 1))
        old.created_at = datetime.now() - timedelta(days=1)
        self.db.commit()
        new = sell(self.db, self.branch, (self.items["Kurkure"], 1))

        today = ledger.list_today_sales(self.db, self.branch.id)
        self.assertEqual([s.id for s in today], [new.id])

    def test_today_sales_are_per_branch(self):
        other, other_items = build_store(self.db, name="North Branch")
        sell(self.db, other, (other_items["Kurkure"], 1))
        self.assertEqual(ledger.list_today_sales(self.db, self.branch.id), [])

    def test_discounted_price(self):
        self.assertAlmostEqual(ledger.discounted_price(100.0, 10), 90.0)
        self.assertAlmostEqual(ledger.discounted_price(100.0, None), 100.0)


if __name__ == '__main__':
    unittest.main()
