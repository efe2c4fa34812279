#!/usr/bin/env python3
"""
Shared fixtures for the store test suites.

PURPOSE:
    Builds an in-memory SQLite database with a small, fully known catalog so
    every suite can assert exact prices, locations and stock levels.

CATALOG:
    Main Branch
      Ground Floor (0)
        Rack A1 (Snacks):      Kurkure 20.00, Dairy Milk 40.00 -10%
        Rack A2 (Grains):      Basmati Rice 100.00 -10%, Salt 20.00
      First Floor (1)
        Rack B1 (Vegetables):  Onion 30.00, Tomato 25.00 -20%
        Rack B2 (Dairy):       Milk 50.00, Paneer 80.00 -5%
"""

import os
import sys

# Add project root to path for proper imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backend.data import catalog, ledger
from backend.data.database import create_tables
from backend.schemas.sales_models import SaleLine

# (rack name, rack category, [(item name, item category, price, discount, stock)])
LAYOUT = [
    ("Ground Floor", 0, [
        ("Rack A1", "Snacks", [
            ("Kurkure", "Snacks", 20.0, 0, 50),
            ("Dairy Milk", "Chocolates", 40.0, 10, 5),
        ]),
        ("Rack A2", "Grains", [
            ("Basmati Rice", "Grains", 100.0, 10, 100),
            ("Salt", "Spices", 20.0, 0, 10),
        ]),
    ]),
    ("First Floor", 1, [
        ("Rack B1", "Vegetables", [
            ("Onion", "Vegetables", 30.0, 0, 60),
            ("Tomato", "Vegetables", 25.0, 20, 8),
        ]),
        ("Rack B2", "Dairy", [
            ("Milk", "Dairy", 50.0, 0, 15),
            ("Paneer", "Dairy", 80.0, 5, 30),
        ]),
    ]),
]


def make_session_factory():
    """A fresh in-memory database shared by every session of the factory."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def build_store(db, name="Main Branch"):
    """Create one branch with the fixed layout. Returns (branch, {item name: item})."""
    branch = catalog.create_branch(db, name, "1 Market Road", is_main_branch=True)
    items = {}
    for floor_name, floor_number, racks in LAYOUT:
        floor = catalog.create_floor(db, branch.id, floor_name, floor_number)
        for rack_name, rack_category, rack_items in racks:
            rack = catalog.create_rack(db, floor.id, rack_name, rack_category)
            for item_name, category, price, discount, stock in rack_items:
                items[item_name] = catalog.create_item(db, {
                    "name": item_name,
                    "category": category,
                    "price": price,
                    "discount": discount,
                    "stock": stock,
                    "rack_id": rack.id,
                    "image_url": f"https://example.com/{item_name.lower().replace(' ', '-')}.jpg",
                })
    return branch, items


def sell(db, branch, *lines, user=None):
    """Record a sale of (item, quantity) pairs."""
    return ledger.create_sale(
        db,
        branch.id,
        user.id if user is not None else None,
        [SaleLine(item_id=item.id, quantity=quantity) for item, quantity in lines],
    )
