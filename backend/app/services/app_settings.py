"""Key/value settings lookups with configured fallbacks."""

from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

import structlog
from sqlalchemy.orm import Session

from backend.app.core.settings import get_settings
from backend.app.models.setting import Setting
from backend.app.schemas.quotation import MAX_VAT_PERCENTAGE, VAT_PERCENTAGE_PLACES

VAT_PERCENTAGE_KEY = "vat_percentage"
QUOTATION_PREFIX_KEY = "quotation_prefix"
QUOTATION_TERMS_KEY = "quotation_terms"

logger = structlog.get_logger(__name__)

SETTING_DESCRIPTIONS = {
    VAT_PERCENTAGE_KEY: "Default VAT percentage",
    QUOTATION_PREFIX_KEY: "Quotation number prefix",
    QUOTATION_TERMS_KEY: "Default terms and conditions",
}


def default_setting_values() -> Dict[str, str]:
    settings = get_settings()
    return {
        VAT_PERCENTAGE_KEY: settings.default_vat_percentage,
        QUOTATION_PREFIX_KEY: settings.default_quotation_prefix,
        QUOTATION_TERMS_KEY: settings.default_quotation_terms,
    }


def get_setting(db: Session, key: str) -> Optional[str]:
    setting = db.query(Setting).filter(Setting.key == key).first()
    return setting.value if setting else None


def get_settings_map(db: Session) -> Dict[str, str]:
    return {setting.key: setting.value for setting in db.query(Setting).order_by(Setting.key).all()}


def validate_setting_value(key: str, value: str) -> str:
    """Normalize a setting value, raising ValueError when a known key gets a bad value."""
    value = value.strip() if key != QUOTATION_TERMS_KEY else value
    if key == VAT_PERCENTAGE_KEY:
        try:
            pct = Decimal(value)
        except InvalidOperation as exc:
            raise ValueError("vat_percentage must be a number") from exc
        if not pct.is_finite() or pct < 0 or pct > MAX_VAT_PERCENTAGE:
            raise ValueError(f"vat_percentage must be between 0 and {MAX_VAT_PERCENTAGE}")
        if pct.normalize().as_tuple().exponent < -VAT_PERCENTAGE_PLACES:
            raise ValueError(f"vat_percentage allows at most {VAT_PERCENTAGE_PLACES} decimal places")
    elif key == QUOTATION_PREFIX_KEY:
        if not value or any(ch.isspace() for ch in value):
            raise ValueError("quotation_prefix must be a non-empty word")
    return value


def upsert_setting(db: Session, key: str, value: str, description: Optional[str] = None) -> Setting:
    setting = db.query(Setting).filter(Setting.key == key).first()
    if setting is None:
        setting = Setting(key=key, value=value, description=description or SETTING_DESCRIPTIONS.get(key))
        db.add(setting)
    else:
        setting.value = value
        if description is not None:
            setting.description = description
    db.commit()
    db.refresh(setting)
    return setting


def resolve_vat_percentage(db: Session, requested: Optional[Decimal]) -> Decimal:
    """Requested percentage if given (0 included), else the stored default."""
    if requested is not None:
        return Decimal(requested)
    stored = get_setting(db, VAT_PERCENTAGE_KEY)
    if stored is not None:
        try:
            return Decimal(stored)
        except InvalidOperation:
            logger.warning("invalid_vat_setting", value=stored)
    return Decimal(get_settings().default_vat_percentage)


def resolve_prefix(db: Session) -> str:
    return get_setting(db, QUOTATION_PREFIX_KEY) or get_settings().default_quotation_prefix


def resolve_terms(db: Session, requested: Optional[str]) -> str:
    if requested:
        return requested
    stored = get_setting(db, QUOTATION_TERMS_KEY)
    if stored is not None:
        return stored
    return get_settings().default_quotation_terms
