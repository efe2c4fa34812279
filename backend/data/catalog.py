"""Catalog store: branches, floors, racks, items and users.

Plain functions over a SQLAlchemy session, one per operation. Lookups return
None when a row is missing; mutations on a missing row raise ``NotFoundError``.
Deleting a branch, floor or rack cascades to everything below it through the ORM
relationships declared in ``models.py``.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from . import models
from .errors import DuplicateUsername, InvalidCredentials, NotFoundError
from .qr_codes import branch_qr_payload, parse_branch_qr, qr_data_url
from ..utils.logger import get_logger
from ..utils.security import mask_pii, passwords_match

logger = get_logger()

STAFF_ROLES = (models.UserRole.branch_manager,)


def _apply(row, updates: Dict[str, Any]):
    for key, value in updates.items():
        setattr(row, key, value)
    return row


# === BRANCHES ===
def list_branches(db: Session) -> List[models.Branch]:
    return db.query(models.Branch).order_by(models.Branch.id).all()

def get_branch(db: Session, branch_id: int) -> Optional[models.Branch]:
    return db.get(models.Branch, branch_id)

def get_branch_with_details(db: Session, branch_id: int) -> Optional[models.Branch]:
    """Branch with floors (by floor number), racks and items eagerly loaded."""
    return (
        db.query(models.Branch)
        .options(
            selectinload(models.Branch.floors)
            .selectinload(models.Floor.racks)
            .selectinload(models.Rack.items)
        )
        .filter(models.Branch.id == branch_id)
        .first()
    )

def get_branch_by_qr(db: Session, qr_id: str) -> Optional[models.Branch]:
    branch_id = parse_branch_qr(qr_id)
    if branch_id is None:
        return None
    return get_branch(db, branch_id)

def create_branch(db: Session, name: str, address: Optional[str] = None, is_main_branch: bool = False) -> models.Branch:
    branch = models.Branch(name=name, address=address, is_main_branch=is_main_branch)
    db.add(branch)
    db.flush()  # assigns the id the QR code encodes
    branch.qr_code = qr_data_url(branch_qr_payload(branch.id))
    db.commit()
    db.refresh(branch)
    logger.info(f"[CATALOG] Created branch {branch.id} '{branch.name}'")
    return branch

def delete_branch(db: Session, branch_id: int) -> None:
    branch = get_branch(db, branch_id)
    if branch is None:
        raise NotFoundError("Branch")
    db.delete(branch)
    db.commit()
    logger.info(f"[CATALOG] Deleted branch {branch_id} with its floors, racks and items")


# === FLOORS ===
def get_floor(db: Session, floor_id: int) -> Optional[models.Floor]:
    return db.get(models.Floor, floor_id)

def list_floors(db: Session, branch_id: int) -> List[models.Floor]:
    return (
        db.query(models.Floor)
        .options(selectinload(models.Floor.racks).selectinload(models.Rack.items))
        .filter(models.Floor.branch_id == branch_id)
        .order_by(models.Floor.floor_number, models.Floor.id)
        .all()
    )

def create_floor(db: Session, branch_id: int, name: str, floor_number: int) -> models.Floor:
    if get_branch(db, branch_id) is None:
        raise NotFoundError("Branch")
    floor = models.Floor(branch_id=branch_id, name=name, floor_number=floor_number)
    db.add(floor)
    db.commit()
    db.refresh(floor)
    return floor

def update_floor(db: Session, floor_id: int, updates: Dict[str, Any]) -> models.Floor:
    floor = get_floor(db, floor_id)
    if floor is None:
        raise NotFoundError("Floor")
    _apply(floor, updates)
    db.commit()
    db.refresh(floor)
    return floor

def delete_floor(db: Session, floor_id: int) -> None:
    floor = get_floor(db, floor_id)
    if floor is None:
        raise NotFoundError("Floor")
    db.delete(floor)
    db.commit()


# === RACKS ===
def get_rack(db: Session, rack_id: int) -> Optional[models.Rack]:
    return db.get(models.Rack, rack_id)

def list_racks(db: Session, floor_id: int) -> List[models.Rack]:
    return (
        db.query(models.Rack)
        .options(selectinload(models.Rack.items))
        .filter(models.Rack.floor_id == floor_id)
        .order_by(models.Rack.id)
        .all()
    )

def create_rack(db: Session, floor_id: int, name: str, category: Optional[str] = None) -> models.Rack:
    if get_floor(db, floor_id) is None:
        raise NotFoundError("Floor")
    rack = models.Rack(floor_id=floor_id, name=name, category=category)
    db.add(rack)
    db.commit()
    db.refresh(rack)
    return rack

def update_rack(db: Session, rack_id: int, updates: Dict[str, Any]) -> models.Rack:
    rack = get_rack(db, rack_id)
    if rack is None:
        raise NotFoundError("Rack")
    _apply(rack, updates)
    db.commit()
    db.refresh(rack)
    return rack

def delete_rack(db: Session, rack_id: int) -> None:
    rack = get_rack(db, rack_id)
    if rack is None:
        raise NotFoundError("Rack")
    db.delete(rack)
    db.commit()


# === ITEMS ===
def get_item(db: Session, item_id: int) -> Optional[models.Item]:
    return db.get(models.Item, item_id)

def list_branch_items(db: Session, branch_id: int) -> List[models.Item]:
    """All items on every rack of every floor of the branch, in id order."""
    return (
        db.query(models.Item)
        .join(models.Rack, models.Item.rack_id == models.Rack.id)
        .join(models.Floor, models.Rack.floor_id == models.Floor.id)
        .filter(models.Floor.branch_id == branch_id)
        .order_by(models.Item.id)
        .all()
    )

def list_items(
    db: Session,
    search: Optional[str] = None,
    category: Optional[str] = None,
    branch_id: Optional[int] = None,
    rack_id: Optional[int] = None,
) -> List[models.Item]:
    """List items.

    A rack filter wins over everything else, then a branch filter; only when
    neither is given are ``search`` (name substring, case-insensitive) and
    ``category`` (exact, ``all`` means any) applied together.
    """
    if rack_id:
        return db.query(models.Item).filter(models.Item.rack_id == rack_id).order_by(models.Item.id).all()

    if branch_id:
        return list_branch_items(db, branch_id)

    query = db.query(models.Item)
    if search:
        query = query.filter(func.lower(models.Item.name).contains(search.lower()))
    if category and category != "all":
        query = query.filter(models.Item.category == category)
    return query.order_by(models.Item.id).all()

def create_item(db: Session, data: Dict[str, Any]) -> models.Item:
    if get_rack(db, data["rack_id"]) is None:
        raise NotFoundError("Rack")
    item = models.Item(**data)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item

def update_item(db: Session, item_id: int, updates: Dict[str, Any]) -> models.Item:
    item = get_item(db, item_id)
    if item is None:
        raise NotFoundError("Item")
    if "rack_id" in updates and get_rack(db, updates["rack_id"]) is None:
        raise NotFoundError("Rack")
    _apply(item, updates)
    db.commit()
    db.refresh(item)
    return item

def delete_item(db: Session, item_id: int) -> None:
    item = get_item(db, item_id)
    if item is None:
        raise NotFoundError("Item")
    db.delete(item)
    db.commit()


# === USERS ===
def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.get(models.User, user_id)

def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()

def create_user(db: Session, **fields) -> models.User:
    user = models.User(**fields)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateUsername(fields.get("username"))
    db.refresh(user)
    return user

def list_branch_staff(db: Session, branch_id: int) -> List[models.User]:
    return (
        db.query(models.User)
        .filter(models.User.branch_id == branch_id, models.User.role.in_(STAFF_ROLES))
        .order_by(models.User.id)
        .all()
    )

def login(
    db: Session,
    identifier: str,
    role: models.UserRole = models.UserRole.customer,
    password: Optional[str] = None,
    branch_id: Optional[int] = None,
) -> models.User:
    """Resolve a login.

    Managers and admins must match a stored password. Customers are looked up by
    username and created on first sight, keyed by whatever identifier they typed
    (phone number or e-mail).
    """
    if role in (models.UserRole.branch_manager, models.UserRole.hq_admin):
        user = get_user_by_username(db, identifier)
        if user is None or not passwords_match(user.password, password):
            logger.warning(f"[AUTH] Rejected {role.value} login for '{mask_pii(identifier)}'")
            raise InvalidCredentials()
        return user

    user = get_user_by_username(db, identifier)
    if user is not None and user.role != models.UserRole.customer:
        # staff accounts only open with their password
        logger.warning(f"[AUTH] Rejected customer login for staff account '{mask_pii(identifier)}'")
        raise InvalidCredentials()
    if user is None:
        user = create_user(
            db,
            username=identifier,
            role=models.UserRole.customer,
            name=identifier,
            phone=identifier,
            email=identifier if "@" in identifier else None,
            branch_id=branch_id,
            password=None,
        )
        logger.info(f"[AUTH] Registered customer {user.id} ('{mask_pii(identifier)}')")
    return user

def create_manager(db: Session, username: str, password: str, branch_id: int, name: Optional[str] = None) -> models.User:
    return create_user(
        db,
        username=username,
        password=password,
        branch_id=branch_id,
        role=models.UserRole.branch_manager,
        name=name or username,
    )
