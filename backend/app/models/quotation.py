"""Quotation header: customer, project, status and stored totals."""

from decimal import Decimal

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base
from backend.app.db.types import ExactDecimal


class Quotation(Base):
    __tablename__ = "quotations"
    __table_args__ = (UniqueConstraint("quotation_number", name="uq_quotations_number"),)

    id = Column(Integer, primary_key=True, index=True)
    quotation_number = Column(String(50), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    project_name = Column(String(255), nullable=False)
    site_location = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default="DRAFT", index=True)

    # Amounts keep every digit; only the export rounds for display
    subtotal = Column(ExactDecimal(64), nullable=False, default=Decimal("0"))
    vat_percentage = Column(ExactDecimal(8), nullable=False, default=Decimal("5"))
    vat_amount = Column(ExactDecimal(64), nullable=False, default=Decimal("0"))
    total = Column(ExactDecimal(64), nullable=False, default=Decimal("0"))

    notes = Column(Text, nullable=True)
    terms = Column(Text, nullable=True)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    customer = relationship("Customer", back_populates="quotations")
    created_by = relationship("User", back_populates="quotations")
    items = relationship(
        "QuotationItem",
        back_populates="quotation",
        cascade="all, delete-orphan",
        order_by="QuotationItem.sort_order",
    )
