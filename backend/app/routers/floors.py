# app/routers/floors.py

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ...data import catalog
from ...data.database import get_db
from ...schemas.catalog_models import (
    FloorCreate,
    FloorOut,
    FloorUpdate,
    FloorWithRacks,
    RackCreate,
    RackOut,
    RackUpdate,
    RackWithItems,
)

router = APIRouter()


# --- Floors ---
@router.get("/branches/{branch_id}/floors", response_model=List[FloorWithRacks])
def read_floors(branch_id: int, db: Session = Depends(get_db)):
    """Floors of a branch ordered by floor number, with racks and items."""
    return catalog.list_floors(db, branch_id)

@router.post("/branches/{branch_id}/floors", response_model=FloorOut, status_code=201)
def create_floor(branch_id: int, payload: FloorCreate, db: Session = Depends(get_db)):
    return catalog.create_floor(db, branch_id, payload.name, payload.floor_number)

@router.put("/floors/{floor_id}", response_model=FloorOut)
def update_floor(floor_id: int, payload: FloorUpdate, db: Session = Depends(get_db)):
    return catalog.update_floor(db, floor_id, payload.model_dump(exclude_unset=True))

@router.delete("/floors/{floor_id}", status_code=204)
def delete_floor(floor_id: int, db: Session = Depends(get_db)):
    catalog.delete_floor(db, floor_id)
    return Response(status_code=204)


# --- Racks ---
@router.get("/floors/{floor_id}/racks", response_model=List[RackWithItems])
def read_racks(floor_id: int, db: Session = Depends(get_db)):
    return catalog.list_racks(db, floor_id)

@router.post("/floors/{floor_id}/racks", response_model=RackOut, status_code=201)
def create_rack(floor_id: int, payload: RackCreate, db: Session = Depends(get_db)):
    return catalog.create_rack(db, floor_id, payload.name, payload.category)

@router.put("/racks/{rack_id}", response_model=RackOut)
def update_rack(rack_id: int, payload: RackUpdate, db: Session = Depends(get_db)):
    return catalog.update_rack(db, rack_id, payload.model_dump(exclude_unset=True))

@router.delete("/racks/{rack_id}", status_code=204)
def delete_rack(rack_id: int, db: Session = Depends(get_db)):
    catalog.delete_rack(db, rack_id)
    return Response(status_code=204)
