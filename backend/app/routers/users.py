# app/routers/users.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...data import catalog
from ...data.database import get_db
from ...schemas.user_models import LoginRequest, ManagerCreate, UserOut

router = APIRouter()


@router.post("/users/login", response_model=UserOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """Customers are created on first login; managers and admins need their password."""
    return catalog.login(db, payload.identifier, payload.role, payload.password, payload.branch_id)

@router.post("/users/manager", response_model=UserOut, status_code=201)
def create_manager(payload: ManagerCreate, db: Session = Depends(get_db)):
    return catalog.create_manager(db, payload.username, payload.password, payload.branch_id, payload.name)
