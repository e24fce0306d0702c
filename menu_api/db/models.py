"""SQLAlchemy model mirroring the JSON menu records."""
from __future__ import annotations

from sqlalchemy import Column, Float, Integer, String, Text

from .session import Base


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=True)
    price = Column(Float, nullable=False)
    category = Column(String(100), nullable=True)
    img = Column(Text, nullable=True)
    description = Column("desc", Text, nullable=True)
