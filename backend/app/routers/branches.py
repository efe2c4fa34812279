# app/routers/branches.py

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ...data import catalog
from ...data.database import get_db
from ...data.errors import NotFoundError
from ...schemas.catalog_models import BranchCreate, BranchDetail, BranchOut
from ...schemas.user_models import UserOut

router = APIRouter()


@router.get("/branches", response_model=List[BranchOut])
def read_branches(db: Session = Depends(get_db)):
    """List every branch."""
    return catalog.list_branches(db)

@router.get("/branches/qr/{qr_id}", response_model=BranchOut)
def read_branch_by_qr(qr_id: str, db: Session = Depends(get_db)):
    """Resolve a scanned ``BRANCH_<id>`` code."""
    branch = catalog.get_branch_by_qr(db, qr_id)
    if branch is None:
        raise NotFoundError("Branch")
    return branch

@router.get("/branches/{branch_id}", response_model=BranchDetail)
def read_branch(branch_id: int, db: Session = Depends(get_db)):
    """A branch with its floors, racks and items."""
    branch = catalog.get_branch_with_details(db, branch_id)
    if branch is None:
        raise NotFoundError("Branch")
    return branch

@router.get("/branches/{branch_id}/staff", response_model=List[UserOut])
def read_branch_staff(branch_id: int, db: Session = Depends(get_db)):
    return catalog.list_branch_staff(db, branch_id)

@router.post("/branches", response_model=BranchOut, status_code=201)
def create_branch(payload: BranchCreate, db: Session = Depends(get_db)):
    return catalog.create_branch(db, payload.name, payload.address, payload.is_main_branch)

@router.delete("/branches/{branch_id}", status_code=204)
def delete_branch(branch_id: int, db: Session = Depends(get_db)):
    catalog.delete_branch(db, branch_id)
    return Response(status_code=204)
