#!/usr/bin/env python3
"""
Test Suite for the catalog store

PURPOSE:
    Exercises branch, floor, rack and item CRUD against an in-memory database,
    including cascading deletes, item filters, branch QR codes and the
    role-dependent login rules.

USAGE:
    Run from project root: python -m pytest tests/test_catalog.py -v
"""

import base64
import unittest

from store_fixtures import build_store, make_session_factory, sell

from backend.data import catalog, models
from backend.data.errors import DuplicateUsername, InvalidCredentials, NotFoundError
from backend.data.populate_db import seed_database
from backend.data.qr_codes import branch_qr_payload, parse_branch_qr


class TestBranches(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()
        self.branch, self.items = build_store(self.db)

    def tearDown(self):
        self.db.close()

    def test_branch_gets_svg_qr_code_for_its_id(self):
        self.assertTrue(self.branch.qr_code.startswith("data:image/svg+xml;base64,"))
        svg = base64.b64decode(self.branch.qr_code.split(",", 1)[1])
        self.assertIn(b"svg", svg)

    def test_lookup_by_qr(self):
        found = catalog.get_branch_by_qr(self.db, branch_qr_payload(self.branch.id))
        self.assertEqual(found.id, self.branch.id)

    def test_malformed_qr_ids(self):
        for qr_id in ("", "BRANCH_", "BRANCH_x1", "SHOP_1", "BRANCH_-1", "BRANCH_²", "BRANCH_١٢"):
            self.assertIsNone(parse_branch_qr(qr_id), qr_id)
        self.assertIsNone(catalog.get_branch_by_qr(self.db, "BRANCH_999"))

    def test_details_are_nested_and_floors_ordered(self):
        upper = catalog.create_floor(self.db, self.branch.id, "Second Floor", 2)
        self.db.expire_all()
        branch = catalog.get_branch_with_details(self.db, self.branch.id)
        self.assertEqual([f.name for f in branch.floors], ["Ground Floor", "First Floor", "Second Floor"])
        self.assertEqual(branch.floors[-1].id, upper.id)
        self.assertEqual([i.name for i in branch.floors[0].racks[0].items], ["Kurkure", "Dairy Milk"])

    def test_delete_branch_cascades(self):
        catalog.delete_branch(self.db, self.branch.id)
        self.assertEqual(self.db.query(models.Floor).count(), 0)
        self.assertEqual(self.db.query(models.Rack).count(), 0)
        self.assertEqual(self.db.query(models.Item).count(), 0)

    def test_delete_branch_keeps_sales(self):
        sell(self.db, self.branch, (self.items["Kurkure"], 1))
        catalog.delete_branch(self.db, self.branch.id)
        self.assertEqual(self.db.query(models.Sale).count(), 1)
        self.assertEqual(self.db.query(models.SaleItem).count(), 1)

    def test_delete_missing_branch(self):
        with self.assertRaises(NotFoundError):
            catalog.delete_branch(self.db, 999)


class TestFloorsAndRacks(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()
        self.branch, self.items = build_store(self.db)

    def tearDown(self):
        self.db.close()

    def test_floor_requires_branch(self):
        with self.assertRaises(NotFoundError):
            catalog.create_floor(self.db, 999, "Ghost Floor", 0)

    def test_update_floor(self):
        floor = catalog.list_floors(self.db, self.branch.id)[1]
        updated = catalog.update_floor(self.db, floor.id, {"name": "Upper Floor"})
        self.assertEqual(updated.name, "Upper Floor")
        self.assertEqual(updated.floor_number, 1)

    def test_delete_floor_cascades_to_racks_and_items(self):
        floor = catalog.list_floors(self.db, self.branch.id)[0]
        catalog.delete_floor(self.db, floor.id)
        remaining = [i.name for i in catalog.list_branch_items(self.db, self.branch.id)]
        self.assertEqual(remaining, ["Onion", "Tomato", "Milk", "Paneer"])

    def test_rack_requires_floor(self):
        with self.assertRaises(NotFoundError):
            catalog.create_rack(self.db, 999, "Rack Z", "Misc")

    def test_delete_rack_cascades_to_items(self):
        rack_id = self.items["Milk"].rack_id
        catalog.delete_rack(self.db, rack_id)
        self.assertIsNone(catalog.get_item(self.db, self.items["Paneer"].id))
        self.assertEqual(catalog.list_items(self.db, rack_id=rack_id), [])


class TestItems(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()
        self.branch, self.items = build_store(self.db)

    def tearDown(self):
        self.db.close()

    def names(self, items):
        return [i.name for i in items]

    def test_search_is_case_insensitive_substring(self):
        self.assertEqual(self.names(catalog.list_items(self.db, search="MILK")), ["Dairy Milk", "Milk"])

    def test_category_filter(self):
        self.assertEqual(self.names(catalog.list_items(self.db, category="Dairy")), ["Milk", "Paneer"])
        self.assertEqual(len(catalog.list_items(self.db, category="all")), 8)

    def test_rack_filter_wins_over_branch_and_search(self):
        rack_id = self.items["Kurkure"].rack_id
        result = catalog.list_items(self.db, search="rice", branch_id=self.branch.id, rack_id=rack_id)
        self.assertEqual(self.names(result), ["Kurkure", "Dairy Milk"])

    def test_branch_filter_ignores_search(self):
        other, _ = build_store(self.db, name="North Branch")
        result = catalog.list_items(self.db, search="rice", branch_id=other.id)
        self.assertEqual(len(result), 8)
        self.assertTrue(all(i.id not in {x.id for x in self.items.values()} for i in result))

    def test_item_category_is_independent_of_rack(self):
        dairy_milk = self.items["Dairy Milk"]
        self.assertEqual(dairy_milk.category, "Chocolates")
        self.assertEqual(dairy_milk.rack.category, "Snacks")

    def test_create_item_requires_rack(self):
        with self.assertRaises(NotFoundError):
            catalog.create_item(self.db, {"name": "Ghost", "category": "X", "price": 1.0,
                                          "rack_id": 999, "image_url": "x"})

    def test_update_item_moves_rack(self):
        target = self.items["Milk"].rack_id
        moved = catalog.update_item(self.db, self.items["Kurkure"].id, {"rack_id": target, "discount": 15})
        self.assertEqual(moved.rack_id, target)
        self.assertEqual(moved.discount, 15)
        with self.assertRaises(NotFoundError):
            catalog.update_item(self.db, self.items["Kurkure"].id, {"rack_id": 999})

    def test_delete_item(self):
        catalog.delete_item(self.db, self.items["Salt"].id)
        self.assertNotIn("Salt", self.names(catalog.list_branch_items(self.db, self.branch.id)))
        with self.assertRaises(NotFoundError):
            catalog.delete_item(self.db, self.items["Salt"].id)


class TestUsers(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()
        self.branch, _ = build_store(self.db)
        self.manager = catalog.create_manager(self.db, "manager1", "manager123", self.branch.id, "Main Manager")

    def tearDown(self):
        self.db.close()

    def test_customer_is_created_on_first_login(self):
        user = catalog.login(self.db, "9876543210", branch_id=self.branch.id)
        self.assertEqual(user.role, models.UserRole.customer)
        self.assertEqual(user.username, "9876543210")
        self.assertEqual(user.phone, "9876543210")
        self.assertIsNone(user.email)
        self.assertIsNone(user.password)

        again = catalog.login(self.db, "9876543210")
        self.assertEqual(again.id, user.id)

    def test_customer_email_identifier(self):
        user = catalog.login(self.db, "asha@example.com")
        self.assertEqual(user.email, "asha@example.com")

    def test_manager_login_checks_password(self):
        user = catalog.login(self.db, "manager1", models.UserRole.branch_manager, "manager123")
        self.assertEqual(user.id, self.manager.id)
        with self.assertRaises(InvalidCredentials):
            catalog.login(self.db, "manager1", models.UserRole.branch_manager, "wrong")
        with self.assertRaises(InvalidCredentials):
            catalog.login(self.db, "manager1", models.UserRole.branch_manager, None)
        with self.assertRaises(InvalidCredentials):
            catalog.login(self.db, "nobody", models.UserRole.hq_admin, "manager123")

    def test_passwordless_customer_cannot_log_in_as_manager(self):
        catalog.login(self.db, "9876543210")
        with self.assertRaises(InvalidCredentials):
            catalog.login(self.db, "9876543210", models.UserRole.branch_manager, "")

    def test_staff_account_cannot_log_in_as_customer(self):
        catalog.create_user(self.db, username="admin", password="admin123", role=models.UserRole.hq_admin)
        for username in ("manager1", "admin"):
            with self.assertRaises(InvalidCredentials):
                catalog.login(self.db, username, models.UserRole.customer)
        # no customer shadow account was created either
        self.assertEqual(self.db.query(models.User).filter(models.User.role == models.UserRole.customer).count(), 0)

    def test_duplicate_username(self):
        with self.assertRaises(DuplicateUsername):
            catalog.create_manager(self.db, "manager1", "other", self.branch.id)

    def test_staff_lists_branch_managers_only(self):
        catalog.login(self.db, "9876543210", branch_id=self.branch.id)
        staff = catalog.list_branch_staff(self.db, self.branch.id)
        self.assertEqual([u.username for u in staff], ["manager1"])


class TestSeed(unittest.TestCase):
    def seeded(self):
        db = make_session_factory()()
        self.assertTrue(seed_database(db))
        return db

    def test_seed_layout(self):
        db = self.seeded()
        branches = catalog.list_branches(db)
        self.assertEqual([b.is_main_branch for b in branches], [True, False])
        detail = catalog.get_branch_with_details(db, branches[0].id)
        self.assertEqual([f.name for f in detail.floors], ["Ground Floor", "1st Floor", "2nd Floor", "3rd Floor"])
        self.assertEqual([len(f.racks) for f in detail.floors], [4, 4, 4, 4])
        self.assertEqual(len(detail.floors[0].racks[0].items), 10)
        self.assertEqual(catalog.login(db, "manager1", models.UserRole.branch_manager, "manager123").branch_id,
                         branches[0].id)
        self.assertEqual(catalog.login(db, "admin", models.UserRole.hq_admin, "admin123").role,
                         models.UserRole.hq_admin)
        db.close()

    def test_seed_is_deterministic_and_runs_once(self):
        first, second = self.seeded(), self.seeded()
        snapshot = lambda db: [(i.name, i.discount, i.stock) for i in db.query(models.Item).order_by(models.Item.id)]
        self.assertEqual(snapshot(first), snapshot(second))
        self.assertFalse(seed_database(first))
        first.close()
        second.close()


if __name__ == '__main__':
    unittest.main()
