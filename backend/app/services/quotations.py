"""Quotation persistence: numbering, pricing and item replacement."""

from decimal import Decimal
from enum import Enum
from typing import Iterable, List, Optional

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.settings import get_settings
from backend.app.core.time import current_year
from backend.app.models.quotation import Quotation
from backend.app.models.quotation_item import QuotationItem
from backend.app.schemas.quotation import QuotationCreate, QuotationItemInput, QuotationUpdate
from backend.app.services.app_settings import resolve_prefix, resolve_terms, resolve_vat_percentage
from backend.app.services.numbering import next_quotation_number
from backend.app.services.pricing import DocumentTotals, PricedLine, compute_document_totals, price_line_items

logger = structlog.get_logger(__name__)

# Scalar fields that cannot be cleared by sending null
_REQUIRED_FIELDS = {"customer_id", "project_name", "status", "vat_percentage"}


class QuotationNumberConflict(RuntimeError):
    """Number assignment kept colliding with concurrently issued numbers."""


def last_issued_quotation_number(db: Session) -> Optional[str]:
    row = (
        db.query(Quotation.quotation_number)
        .order_by(Quotation.created_at.desc(), Quotation.id.desc())
        .first()
    )
    return row[0] if row else None


def get_quotation(db: Session, quotation_id: int) -> Optional[Quotation]:
    return db.query(Quotation).filter(Quotation.id == quotation_id).first()


def list_quotations(db: Session, status: Optional[str] = None, customer_id: Optional[int] = None) -> List[Quotation]:
    query = db.query(Quotation)
    if status:
        query = query.filter(Quotation.status == status)
    if customer_id is not None:
        query = query.filter(Quotation.customer_id == customer_id)
    return query.order_by(Quotation.created_at.desc(), Quotation.id.desc()).all()


def _build_items(priced: Iterable[PricedLine]) -> List[QuotationItem]:
    return [
        QuotationItem(
            scope_of_work=line.scope_of_work,
            description=line.description,
            quantity=line.quantity,
            rate=line.rate,
            vat_rate=line.vat_rate,
            sub_total=line.sub_total,
            sort_order=line.sort_order,
        )
        for line in priced
    ]


def _apply_totals(quotation: Quotation, totals: DocumentTotals) -> None:
    quotation.subtotal = totals.subtotal
    quotation.vat_amount = totals.vat_amount
    quotation.total = totals.total


def _number_taken(db: Session, quotation_number: str) -> bool:
    return db.query(Quotation.id).filter(Quotation.quotation_number == quotation_number).first() is not None


def create_quotation(
    db: Session,
    payload: QuotationCreate,
    created_by_id: Optional[int],
    year: Optional[int] = None,
) -> Quotation:
    """Price, number and insert a quotation with its items in one commit.

    Number assignment and the insert share a transaction; a collision on the
    unique ``quotation_number`` rolls back and assigns a fresh number.
    """
    vat_percentage = resolve_vat_percentage(db, payload.vat_percentage)
    terms = resolve_terms(db, payload.terms)
    prefix = resolve_prefix(db)
    priced = price_line_items(payload.items, vat_percentage)
    totals = compute_document_totals(priced, vat_percentage)
    issue_year = year if year is not None else current_year()

    attempts = get_settings().quotation_number_retries
    for attempt in range(1, attempts + 1):
        quotation_number = next_quotation_number(last_issued_quotation_number(db), prefix, issue_year)
        quotation = Quotation(
            quotation_number=quotation_number,
            customer_id=payload.customer_id,
            project_name=payload.project_name,
            site_location=payload.site_location or None,
            status=payload.status.value,
            vat_percentage=vat_percentage,
            notes=payload.notes or None,
            terms=terms,
            created_by_id=created_by_id,
            items=_build_items(priced),
        )
        _apply_totals(quotation, totals)
        db.add(quotation)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            if not _number_taken(db, quotation_number):
                raise
            logger.warning("quotation_number_conflict", quotation_number=quotation_number, attempt=attempt)
            continue
        db.refresh(quotation)
        logger.info(
            "quotation_created",
            quotation_id=quotation.id,
            quotation_number=quotation.quotation_number,
            items=len(priced),
            total=str(totals.total),
        )
        return quotation

    raise QuotationNumberConflict(f"Could not assign a unique quotation number after {attempts} attempts")


def replace_quotation_items(
    db: Session,
    quotation: Quotation,
    items: Iterable[QuotationItemInput],
    vat_percentage: Decimal,
) -> DocumentTotals:
    """Delete every existing line, insert the new set and restate totals."""
    priced = price_line_items(items, vat_percentage)
    quotation.items.clear()
    db.flush()
    quotation.items.extend(_build_items(priced))
    totals = compute_document_totals(priced, vat_percentage)
    _apply_totals(quotation, totals)
    return totals


def update_quotation(db: Session, quotation: Quotation, payload: QuotationUpdate) -> Quotation:
    """Apply the fields that were sent; totals follow items and VAT changes.

    A VAT percentage change without new items recomputes the document totals
    from the stored line subtotals but keeps each line's stored ``vat_rate``.
    """
    changes = payload.model_dump(exclude_unset=True, exclude={"items"})
    for field, value in changes.items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        if isinstance(value, Enum):
            value = value.value
        setattr(quotation, field, value)

    vat_percentage = Decimal(quotation.vat_percentage)
    if payload.items is not None:
        replace_quotation_items(db, quotation, payload.items, vat_percentage)
    elif changes.get("vat_percentage") is not None:
        _apply_totals(quotation, compute_document_totals(quotation.items, vat_percentage))

    db.commit()
    db.refresh(quotation)
    logger.info(
        "quotation_updated",
        quotation_id=quotation.id,
        fields=sorted(changes),
        items_replaced=payload.items is not None,
    )
    return quotation


def delete_quotation(db: Session, quotation: Quotation) -> None:
    quotation_id, quotation_number = quotation.id, quotation.quotation_number
    db.delete(quotation)
    db.commit()
    logger.info("quotation_deleted", quotation_id=quotation_id, quotation_number=quotation_number)
