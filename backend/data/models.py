from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from .database import Base
import enum

class UserRole(str, enum.Enum):
    customer = "customer"
    branch_manager = "branch_manager"
    hq_admin = "hq_admin"

class Branch(Base):
    __tablename__ = "branches"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    address = Column(String)
    qr_code = Column(String)  # base64 data URL, written once after the id is known
    is_main_branch = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.now)

    floors = relationship(
        "Floor",
        back_populates="branch",
        cascade="all, delete-orphan",
        order_by="Floor.floor_number",
    )

class Floor(Base):
    __tablename__ = "floors"

    id = Column(Integer, primary_key=True, index=True)
    branch_id = Column(Integer, ForeignKey("branches.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    floor_number = Column(Integer, nullable=False)

    branch = relationship("Branch", back_populates="floors")
    racks = relationship("Rack", back_populates="floor", cascade="all, delete-orphan", order_by="Rack.id")

class Rack(Base):
    __tablename__ = "racks"

    id = Column(Integer, primary_key=True, index=True)
    floor_id = Column(Integer, ForeignKey("floors.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    category = Column(String)  # display label, not a foreign key

    floor = relationship("Floor", back_populates="racks")
    items = relationship("Item", back_populates="rack", cascade="all, delete-orphan", order_by="Item.id")

class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    description = Column(String)
    category = Column(String, nullable=False)  # independent of Rack.category
    price = Column(Float, nullable=False)
    discount = Column(Integer, default=0)
    rack_id = Column(Integer, ForeignKey("racks.id", ondelete="CASCADE"), nullable=False, index=True)
    image_url = Column(String, nullable=False)
    stock = Column(Integer, default=100)  # no floor, may go negative

    rack = relationship("Rack", back_populates="items")

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True)
    password = Column(String, nullable=True)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.customer)
    branch_id = Column(Integer, nullable=True, index=True)
    name = Column(String)
    email = Column(String)
    phone = Column(String)
    created_at = Column(DateTime, default=datetime.now)

# Ledger rows reference catalog and users by plain ids: deleting an item or a
# branch never touches historical sales.
class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    branch_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=True, index=True)
    total_amount = Column(Float, nullable=False)
    items_count = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.now, index=True)

    items = relationship("SaleItem", back_populates="sale", order_by="SaleItem.id")

class SaleItem(Base):
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, index=True)
    sale_id = Column(Integer, ForeignKey("sales.id"), nullable=False, index=True)
    item_id = Column(Integer, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    price_at_sale = Column(Float, nullable=False)

    sale = relationship("Sale", back_populates="items")
