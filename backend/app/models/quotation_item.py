"""Quotation line items."""

from decimal import Decimal

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.db.types import ExactDecimal


class QuotationItem(Base):
    __tablename__ = "quotation_items"

    id = Column(Integer, primary_key=True, index=True)
    quotation_id = Column(Integer, ForeignKey("quotations.id", ondelete="CASCADE"), nullable=False, index=True)
    scope_of_work = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    quantity = Column(ExactDecimal(32), nullable=False)
    rate = Column(ExactDecimal(32), nullable=False)
    # Absolute VAT amount for this line, not a percentage
    vat_rate = Column(ExactDecimal(64), nullable=False, default=Decimal("0"))
    sub_total = Column(ExactDecimal(64), nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)

    quotation = relationship("Quotation", back_populates="items")
