"""Key/value application settings (VAT default, number prefix, terms)."""

from sqlalchemy import Column, DateTime, String, Text

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Setting(Base):
    __tablename__ = "settings"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    description = Column(String(255), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
