"""Catalog request/response models: branches, floors, racks and items.

Create models validate incoming payloads, update models are fully optional and
applied with ``exclude_unset``, and the ``*Out`` models are read from ORM rows.
"""
from datetime import datetime
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import Field, model_validator

from .base import CamelModel


class PartialUpdate(CamelModel):
    """Fields left out are kept; fields named in ``not_null`` may not be set to null."""
    not_null: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls(self):
        nulled = sorted(f for f in self.model_fields_set & self.not_null if getattr(self, f) is None)
        if nulled:
            raise ValueError(f"{', '.join(nulled)} may not be null")
        return self


# --- Item Schemas ---
class ItemBase(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    category: str = Field(min_length=1)
    price: float = Field(ge=0)
    discount: int = Field(default=0, ge=0, le=100)
    rack_id: int
    image_url: str
    stock: int = 100

class ItemCreate(ItemBase):
    pass

class ItemUpdate(PartialUpdate):
    not_null: ClassVar[FrozenSet[str]] = frozenset(
        {"name", "category", "price", "discount", "rack_id", "image_url", "stock"}
    )

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, ge=0)
    discount: Optional[int] = Field(default=None, ge=0, le=100)
    rack_id: Optional[int] = None
    image_url: Optional[str] = None
    stock: Optional[int] = None

class ItemOut(ItemBase):
    id: int
    # stored rows may predate validation
    discount: Optional[int] = 0
    stock: Optional[int] = 100


# --- Rack Schemas ---
class RackCreate(CamelModel):
    name: str = Field(min_length=1)
    category: Optional[str] = None

class RackUpdate(PartialUpdate):
    not_null: ClassVar[FrozenSet[str]] = frozenset({"name"})

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None

class RackOut(RackCreate):
    id: int
    floor_id: int

class RackWithItems(RackOut):
    items: List[ItemOut] = []


# --- Floor Schemas ---
class FloorCreate(CamelModel):
    name: str = Field(min_length=1)
    floor_number: int

class FloorUpdate(PartialUpdate):
    not_null: ClassVar[FrozenSet[str]] = frozenset({"name", "floor_number"})

    name: Optional[str] = Field(default=None, min_length=1)
    floor_number: Optional[int] = None

class FloorOut(FloorCreate):
    id: int
    branch_id: int

class FloorWithRacks(FloorOut):
    racks: List[RackWithItems] = []


# --- Branch Schemas ---
class BranchCreate(CamelModel):
    name: str = Field(min_length=1)
    address: Optional[str] = None
    is_main_branch: bool = False

class BranchOut(BranchCreate):
    id: int
    qr_code: Optional[str] = None
    is_main_branch: Optional[bool] = False
    created_at: Optional[datetime] = None

class BranchDetail(BranchOut):
    floors: List[FloorWithRacks] = []
