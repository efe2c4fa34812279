"""Reporting over the sales ledger and the catalog.

Three read-only views for a branch:

- ``get_manager_stats``: today's customers and what they bought, items sold
  today, low stock, today's revenue and all-time best / worst sellers.
- ``get_regular_customers``: users with repeat visits, ranked by spend.
- ``get_sales_stats``: the compact sales summary used by the branch page.

Every view is a best-effort snapshot: nothing is locked, so two calls racing
with a purchase may differ. Lookups are batched by id sets; sale lines whose item
has since been deleted drop out of the inner joins and are skipped.
"""
from collections import OrderedDict
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from . import models
from .catalog import list_branch_items
from .ledger import list_today_sales, start_of_today
from ..app.config import Config
from ..schemas.sales_models import (
    DailySales,
    LowStockItem,
    ManagerStats,
    ProductQuantity,
    Purchase,
    PurchasedItem,
    RankedItem,
    RegularCustomer,
    SalesStats,
    SoldItem,
    StockLevel,
    TodayCustomer,
)
from ..utils.logger import get_logger

logger = get_logger()


def _quantities_sold(db: Session, item_ids: List[int]):
    """All-time (item, quantity) rows for ``item_ids``; never-sold items get 0."""
    quantity = func.coalesce(func.sum(models.SaleItem.quantity), 0)
    return (
        db.query(models.Item, quantity.label("quantity"))
        .outerjoin(models.SaleItem, models.SaleItem.item_id == models.Item.id)
        .filter(models.Item.id.in_(item_ids))
        .group_by(models.Item.id)
        .all()
    )

def _ranked(db: Session, item_ids: List[int], limit: int):
    """Return (top, least) lists of (item, quantity), ties broken by item id."""
    if not item_ids:
        return [], []
    rows = [(item, int(qty)) for item, qty in _quantities_sold(db, item_ids)]
    top = sorted(rows, key=lambda r: (-r[1], r[0].id))[:limit]
    least = sorted(rows, key=lambda r: (r[1], r[0].id))[:limit]
    return top, least

def _lines_with_items(db: Session, sale_ids: List[int]):
    """(sale line, item) pairs for the given sales, in recorded order."""
    if not sale_ids:
        return []
    return (
        db.query(models.SaleItem, models.Item)
        .join(models.Item, models.Item.id == models.SaleItem.item_id)
        .filter(models.SaleItem.sale_id.in_(sale_ids))
        .order_by(models.SaleItem.sale_id, models.SaleItem.id)
        .all()
    )


def _today_customers(db: Session, today_sales: List[models.Sale]) -> List[TodayCustomer]:
    # user id -> that user's sale ids, in order of first sale
    sales_by_user: "OrderedDict[int, List[int]]" = OrderedDict()
    for sale in today_sales:
        if sale.user_id is not None:
            sales_by_user.setdefault(sale.user_id, []).append(sale.id)
    if not sales_by_user:
        return []

    users = {
        u.id: u
        for u in db.query(models.User).filter(models.User.id.in_(list(sales_by_user))).all()
    }
    lines_by_sale: Dict[int, List[Purchase]] = {}
    for line, item in _lines_with_items(db, [sid for sids in sales_by_user.values() for sid in sids]):
        lines_by_sale.setdefault(line.sale_id, []).append(
            Purchase(
                name=item.name,
                quantity=line.quantity,
                price=float(line.price_at_sale),
                total=float(line.price_at_sale) * line.quantity,
            )
        )

    customers = []
    for user_id, sale_ids in sales_by_user.items():
        user = users.get(user_id)
        if user is None:
            continue
        purchases = [p for sid in sale_ids for p in lines_by_sale.get(sid, [])]
        customers.append(
            TodayCustomer(
                id=user.id,
                name=user.name,
                username=user.username,
                phone=user.phone,
                purchases=purchases,
                total_spent=sum(p.total for p in purchases),
            )
        )
    return customers

def _sold_items(db: Session, today_sales: List[models.Sale]) -> List[SoldItem]:
    sold: Dict[int, SoldItem] = {}
    for line, item in _lines_with_items(db, [s.id for s in today_sales]):
        if item.id in sold:
            sold[item.id].quantity += line.quantity
        else:
            sold[item.id] = SoldItem(id=item.id, name=item.name, category=item.category, quantity=line.quantity)
    return [sold[item_id] for item_id in sorted(sold)]

def get_manager_stats(db: Session, branch_id: int, now: Optional[datetime] = None) -> ManagerStats:
    """Dashboard for a branch manager. "Today" is local midnight to now."""
    branch_items = list_branch_items(db, branch_id)
    today_sales = list_today_sales(db, branch_id, now)

    low_stock = [
        LowStockItem(id=i.id, name=i.name, category=i.category, stock=i.stock or 0)
        for i in branch_items
        if (i.stock or 0) < Config.LOW_STOCK_THRESHOLD
    ]
    # ledger totals, not recomputed from lines
    revenue = sum(float(s.total_amount) for s in today_sales)
    top, least = _ranked(db, [i.id for i in branch_items], Config.TOP_PRODUCTS_LIMIT)

    stats = ManagerStats(
        today_customers=_today_customers(db, today_sales),
        sold_items_today=_sold_items(db, today_sales),
        low_stock_items=low_stock,
        today_revenue=revenue,
        top_products=[ProductQuantity(id=item.id, name=item.name, quantity=qty) for item, qty in top],
        least_products=[ProductQuantity(id=item.id, name=item.name, quantity=qty) for item, qty in least],
    )
    logger.info(
        f"[STATS] Branch {branch_id}: {len(today_sales)} sales today, revenue={revenue:.2f}, "
        f"{len(low_stock)} low-stock items"
    )
    return stats


def get_regular_customers(db: Session, branch_id: int) -> List[RegularCustomer]:
    """Users with at least ``REGULAR_CUSTOMER_MIN_VISITS`` sales in the branch, biggest spenders first."""
    visit_count = func.count(models.Sale.id)
    total_spent = func.sum(models.Sale.total_amount)
    grouped = (
        db.query(models.Sale.user_id, visit_count.label("visits"), total_spent.label("spent"))
        .filter(models.Sale.branch_id == branch_id, models.Sale.user_id.isnot(None))
        .group_by(models.Sale.user_id)
        .having(visit_count >= Config.REGULAR_CUSTOMER_MIN_VISITS)
        .all()
    )
    if not grouped:
        return []
    user_ids = [row.user_id for row in grouped]
    users = {u.id: u for u in db.query(models.User).filter(models.User.id.in_(user_ids)).all()}

    bought = (
        db.query(
            models.Sale.user_id,
            models.Item.id,
            models.Item.name,
            func.sum(models.SaleItem.quantity).label("quantity"),
        )
        .join(models.SaleItem, models.SaleItem.sale_id == models.Sale.id)
        .join(models.Item, models.Item.id == models.SaleItem.item_id)
        .filter(models.Sale.branch_id == branch_id, models.Sale.user_id.in_(user_ids))
        .group_by(models.Sale.user_id, models.Item.id, models.Item.name)
        .order_by(models.Sale.user_id, models.Item.id)
        .all()
    )
    items_by_user: Dict[int, List[PurchasedItem]] = {}
    for user_id, _item_id, name, quantity in bought:
        items_by_user.setdefault(user_id, []).append(PurchasedItem(name=name, quantity=int(quantity)))

    customers = []
    for row in grouped:
        user = users.get(row.user_id)
        if user is None:
            continue
        customers.append(
            RegularCustomer(
                id=user.id,
                name=user.name,
                username=user.username,
                phone=user.phone,
                visit_count=int(row.visits),
                total_spent=float(row.spent or 0),
                items=items_by_user.get(user.id, []),
            )
        )
    customers.sort(key=lambda c: (-c.total_spent, c.id))
    return customers


def get_sales_stats(db: Session, branch_id: int, now: Optional[datetime] = None) -> SalesStats:
    """Compact sales summary: recent daily revenue, best and worst sellers, stock alerts."""
    branch_items = list_branch_items(db, branch_id)

    daily: Dict[str, float] = {}
    rows = (
        db.query(models.Sale.created_at, models.Sale.total_amount)
        .filter(models.Sale.branch_id == branch_id)
        .all()
    )
    for created_at, amount in rows:
        day = created_at.strftime("%Y-%m-%d")
        daily[day] = daily.get(day, 0.0) + float(amount)
    recent_days = sorted(daily)[-Config.DAILY_SALES_DAYS:]

    sold_today = (
        db.query(func.count(models.Sale.id))
        .filter(models.Sale.branch_id == branch_id, models.Sale.created_at >= start_of_today(now))
        .scalar()
    )
    top, least = _ranked(db, [i.id for i in branch_items], Config.SALES_STATS_TOP_LIMIT)

    return SalesStats(
        daily_sales=[DailySales(date=day, amount=daily[day]) for day in recent_days],
        top_items=[RankedItem(name=i.name, quantity=q, image_url=i.image_url) for i, q in top],
        least_items=[RankedItem(name=i.name, quantity=q, image_url=i.image_url) for i, q in least],
        items_sold_today=int(sold_today or 0),
        low_stock_items=[
            StockLevel(name=i.name, stock=i.stock or 0)
            for i in branch_items
            if (i.stock or 0) < Config.SALES_STATS_LOW_STOCK_THRESHOLD
        ],
    )
