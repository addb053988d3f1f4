"""Catalog of priced items used to fill quotation lines."""

from decimal import Decimal

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base
from backend.app.db.types import ExactDecimal


class CatalogItem(Base):
    __tablename__ = "catalog_items"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String(20), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    unit = Column(String(20), nullable=False)
    default_rate = Column(ExactDecimal(32), nullable=False, default=Decimal("0"))
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
