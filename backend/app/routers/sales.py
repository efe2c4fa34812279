# app/routers/sales.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...data import ledger, statistics
from ...data.database import get_db
from ...schemas.sales_models import ManagerStats, RegularCustomer, SaleCreate, SaleCreated, SalesStats

router = APIRouter()


@router.post("/sales", response_model=SaleCreated, status_code=201)
def create_sale(payload: SaleCreate, db: Session = Depends(get_db)):
    sale = ledger.create_sale(db, payload.branch_id, payload.user_id, payload.items)
    return SaleCreated(success=True, sale_id=sale.id)

@router.get("/branches/{branch_id}/sales/stats", response_model=SalesStats)
def read_sales_stats(branch_id: int, db: Session = Depends(get_db)):
    return statistics.get_sales_stats(db, branch_id)

# --- Manager dashboard ---
@router.get("/manager/stats/{branch_id}", response_model=ManagerStats)
def read_manager_stats(branch_id: int, db: Session = Depends(get_db)):
    return statistics.get_manager_stats(db, branch_id)

@router.get("/manager/regular-customers/{branch_id}", response_model=List[RegularCustomer])
def read_regular_customers(branch_id: int, db: Session = Depends(get_db)):
    return statistics.get_regular_customers(db, branch_id)
