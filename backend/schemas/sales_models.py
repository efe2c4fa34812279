"""Sales ledger and reporting models."""
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class SaleLine(CamelModel):
    item_id: int
    quantity: int = Field(ge=1)

class SaleCreate(CamelModel):
    branch_id: int
    user_id: Optional[int] = None
    items: List[SaleLine]

class SaleCreated(CamelModel):
    success: bool
    sale_id: int


# --- Manager dashboard ---
class Purchase(CamelModel):
    name: str
    quantity: int
    price: float
    total: float

class TodayCustomer(CamelModel):
    id: int
    name: Optional[str] = None
    username: Optional[str] = None
    phone: Optional[str] = None
    purchases: List[Purchase] = []
    total_spent: float = 0.0

class SoldItem(CamelModel):
    id: int
    name: str
    category: Optional[str] = None
    quantity: int

class LowStockItem(CamelModel):
    id: int
    name: str
    category: Optional[str] = None
    stock: int

class ProductQuantity(CamelModel):
    id: int
    name: str
    quantity: int

class ManagerStats(CamelModel):
    today_customers: List[TodayCustomer] = []
    sold_items_today: List[SoldItem] = []
    low_stock_items: List[LowStockItem] = []
    today_revenue: float = 0.0
    top_products: List[ProductQuantity] = []
    least_products: List[ProductQuantity] = []


# --- Regular customers ---
class PurchasedItem(CamelModel):
    name: str
    quantity: int

class RegularCustomer(CamelModel):
    id: int
    name: Optional[str] = None
    username: Optional[str] = None
    phone: Optional[str] = None
    visit_count: int
    total_spent: float
    items: List[PurchasedItem] = []


# --- Branch sales stats ---
class DailySales(CamelModel):
    date: str
    amount: float

class RankedItem(CamelModel):
    name: str
    quantity: int
    image_url: Optional[str] = None

class StockLevel(CamelModel):
    name: str
    stock: int

class SalesStats(CamelModel):
    daily_sales: List[DailySales] = []
    top_items: List[RankedItem] = []
    least_items: List[RankedItem] = []
    items_sold_today: int = 0
    low_stock_items: List[StockLevel] = []
