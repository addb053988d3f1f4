import os
from decimal import Decimal

import structlog
from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.models.catalog_item import CatalogItem
from backend.app.models.customer import Customer
from backend.app.models.setting import Setting
from backend.app.models.user import User
from backend.app.services.app_settings import SETTING_DESCRIPTIONS, default_setting_values

logger = structlog.get_logger(__name__)

DEFAULT_DEV_PASSWORD = "Secret123!"
DEFAULT_DEV_USER = "admin@crystalline.ae"

SAMPLE_CUSTOMERS = [
    {
        "company_name": "Emirates Development LLC",
        "contact_person": "Ahmed Al Maktoum",
        "phone": "+971-4-123-4567",
        "email": "ahmed@emiratesdev.ae",
        "address": "Business Bay, Dubai, UAE",
    },
    {
        "company_name": "Dubai Properties Group",
        "contact_person": "Sara Johnson",
        "phone": "+971-4-234-5678",
        "email": "sara@dubaiproperties.ae",
        "address": "Downtown Dubai, UAE",
    },
]

SAMPLE_ITEMS = [
    {
        "category": "GLASS",
        "name": "12mm Clear Tempered Glass",
        "description": "Crystal clear tempered safety glass, 12mm thickness",
        "unit": "sqm",
        "default_rate": Decimal("280.00"),
    },
    {
        "category": "ALUMINUM",
        "name": "Aluminum Profile System",
        "description": "Structural aluminum profiles for glass installation",
        "unit": "rm",
        "default_rate": Decimal("85.00"),
    },
]


def ensure_default_settings(db: Session) -> None:
    """Insert the default VAT percentage, number prefix and terms when missing."""
    existing = {key for (key,) in db.query(Setting.key).all()}
    created = False
    for key, value in default_setting_values().items():
        if key in existing:
            continue
        db.add(Setting(key=key, value=value, description=SETTING_DESCRIPTIONS.get(key)))
        created = True
    if created:
        db.commit()


def seed_development_data(db: Session) -> None:
    """
    Create default settings, a development user and sample records for local development.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    ensure_default_settings(db)

    if not db.query(User).filter(User.email == DEFAULT_DEV_USER).first():
        db.add(
            User(
                email=DEFAULT_DEV_USER,
                full_name="System User",
                hashed_password=get_password_hash(DEFAULT_DEV_PASSWORD),
                is_active=True,
                is_admin=True,
            )
        )
    if db.query(Customer).count() == 0:
        db.add_all(Customer(**data) for data in SAMPLE_CUSTOMERS)
    if db.query(CatalogItem).count() == 0:
        db.add_all(CatalogItem(**data) for data in SAMPLE_ITEMS)
    db.commit()
    logger.info("development_data_seeded", user=DEFAULT_DEV_USER)
