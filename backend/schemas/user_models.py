"""User and login models. Passwords are accepted, never returned."""
from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel
from ..data.models import UserRole


class LoginRequest(CamelModel):
    identifier: str = Field(min_length=1)
    password: Optional[str] = None
    role: UserRole = UserRole.customer
    branch_id: Optional[int] = None

class ManagerCreate(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    branch_id: int
    name: Optional[str] = None

class UserOut(CamelModel):
    id: int
    username: Optional[str] = None
    role: UserRole
    branch_id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
