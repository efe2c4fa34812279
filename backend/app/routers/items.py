# app/routers/items.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from ...data import catalog
from ...data.database import get_db
from ...data.errors import NotFoundError
from ...schemas.catalog_models import ItemCreate, ItemOut, ItemUpdate

router = APIRouter()


@router.get("/items", response_model=List[ItemOut])
def read_items(
    search: Optional[str] = None,
    category: Optional[str] = None,
    branch_id: Optional[int] = Query(None, alias="branchId"),
    rack_id: Optional[int] = Query(None, alias="rackId"),
    db: Session = Depends(get_db),
):
    """Items filtered by rack, else branch, else name search and category."""
    return catalog.list_items(db, search=search, category=category, branch_id=branch_id, rack_id=rack_id)

@router.get("/items/{item_id}", response_model=ItemOut)
def read_item(item_id: int, db: Session = Depends(get_db)):
    item = catalog.get_item(db, item_id)
    if item is None:
        raise NotFoundError("Item")
    return item

@router.post("/items", response_model=ItemOut, status_code=201)
def create_item(payload: ItemCreate, db: Session = Depends(get_db)):
    return catalog.create_item(db, payload.model_dump())

@router.put("/items/{item_id}", response_model=ItemOut)
def update_item(item_id: int, payload: ItemUpdate, db: Session = Depends(get_db)):
    return catalog.update_item(db, item_id, payload.model_dump(exclude_unset=True))

@router.delete("/items/{item_id}", status_code=204)
def delete_item(item_id: int, db: Session = Depends(get_db)):
    catalog.delete_item(db, item_id)
    return Response(status_code=204)
