"""SQLAlchemy models mirroring users.json and cart.json."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from .session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False)
    password = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class CartItem(Base):
    """One line of a user's cart; a cart without rows is empty."""

    __tablename__ = "cart_items"

    username = Column(String(255), primary_key=True)
    item = Column(String(255), primary_key=True)
    quantity = Column(Integer, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
