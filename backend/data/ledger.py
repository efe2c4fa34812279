"""Sales ledger: records purchases and exposes the "today" window.

A sale is written once and never touched again. Each line freezes the
discounted unit price at sale time, and the header total is computed from those
lines when the sale is created. Later catalog edits do not change either.
"""
from datetime import datetime, time
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from . import models
from ..schemas.sales_models import SaleLine
from ..utils.logger import get_logger

logger = get_logger()


def discounted_price(price: float, discount: Optional[int]) -> float:
    return price * (1 - (discount or 0) / 100)

def start_of_today(now: Optional[datetime] = None) -> datetime:
    """Local midnight of the current day."""
    now = now or datetime.now()
    return datetime.combine(now.date(), time.min)

def create_sale(db: Session, branch_id: int, user_id: Optional[int], lines: Iterable[SaleLine]) -> models.Sale:
    """Record a sale and decrement stock.

    Lines naming an unknown item are skipped but still counted in
    ``items_count``. Stock is decremented without any guard, so concurrent
    purchases of the last unit can drive it negative.
    """
    lines = list(lines)
    item_ids = {line.item_id for line in lines}
    catalog = {
        item.id: item
        for item in db.query(models.Item).filter(models.Item.id.in_(item_ids)).all()
    } if item_ids else {}

    total = 0.0
    sale_items: List[models.SaleItem] = []
    for line in lines:
        item = catalog.get(line.item_id)
        if item is None:
            logger.warning(f"[SALES] Skipping unknown item {line.item_id} in sale for branch {branch_id}")
            continue
        unit = discounted_price(item.price, item.discount)
        total += unit * line.quantity
        sale_items.append(models.SaleItem(item_id=item.id, quantity=line.quantity, price_at_sale=round(unit, 2)))
        item.stock = (item.stock or 0) - line.quantity

    sale = models.Sale(
        branch_id=branch_id,
        user_id=user_id or None,
        total_amount=round(total, 2),
        items_count=len(lines),
        items=sale_items,
    )
    db.add(sale)
    db.commit()
    db.refresh(sale)
    logger.info(f"[SALES] Sale {sale.id} branch={branch_id} user={sale.user_id} total={sale.total_amount:.2f} lines={len(sale_items)}")
    return sale

def list_today_sales(db: Session, branch_id: int, now: Optional[datetime] = None) -> List[models.Sale]:
    """Branch sales from local midnight to now, in recorded order."""
    return (
        db.query(models.Sale)
        .filter(models.Sale.branch_id == branch_id, models.Sale.created_at >= start_of_today(now))
        .order_by(models.Sale.id)
        .all()
    )
