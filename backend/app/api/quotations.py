"""Quotation routes: CRUD plus spreadsheet download."""

from typing import List

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_customer import customer_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.quotation import Quotation
from backend.app.models.user import User
from backend.app.schemas.quotation import QuotationCreate, QuotationRead, QuotationStatus, QuotationUpdate
from backend.app.services.numbering import MalformedSequenceState
from backend.app.services.pricing import InvalidInput
from backend.app.services.quotation_export import XLSX_MEDIA_TYPE, export_quotation_xlsx, quotation_export_filename
from backend.app.services.quotations import (
    QuotationNumberConflict,
    create_quotation,
    delete_quotation,
    get_quotation,
    list_quotations,
    update_quotation,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/quotations", tags=["quotations"])


def _get_quotation_or_404(db: Session, quotation_id: int) -> Quotation:
    quotation = get_quotation(db, quotation_id)
    if not quotation:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quotation not found")
    return quotation


def _ensure_customer_exists(db: Session, customer_id: int) -> None:
    if not customer_crud.get(db, customer_id=customer_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")


@router.get("/", response_model=List[QuotationRead])
async def list_all_quotations(
    status_filter: QuotationStatus | None = Query(None, alias="status"),
    customer_id: int | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_quotations(
        db, status=status_filter.value if status_filter else None, customer_id=customer_id
    )


@router.post("/", response_model=QuotationRead, status_code=status.HTTP_201_CREATED)
async def create_new_quotation(
    payload: QuotationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _ensure_customer_exists(db, payload.customer_id)
    try:
        return create_quotation(db, payload, created_by_id=current_user.id)
    except InvalidInput as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except MalformedSequenceState as exc:
        logger.error("quotation_sequence_malformed", error=str(exc))
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
    except QuotationNumberConflict as exc:
        logger.error("quotation_number_unavailable", error=str(exc))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.get("/{quotation_id}", response_model=QuotationRead)
async def get_single_quotation(
    quotation_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)
):
    return _get_quotation_or_404(db, quotation_id)


@router.patch("/{quotation_id}", response_model=QuotationRead)
async def update_existing_quotation(
    quotation_id: int,
    payload: QuotationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    quotation = _get_quotation_or_404(db, quotation_id)
    if payload.customer_id is not None:
        _ensure_customer_exists(db, payload.customer_id)
    try:
        return update_quotation(db, quotation, payload)
    except InvalidInput as exc:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(exc))


@router.delete("/{quotation_id}")
async def delete_existing_quotation(
    quotation_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)
):
    quotation = _get_quotation_or_404(db, quotation_id)
    delete_quotation(db, quotation)
    return {"message": "Quotation deleted successfully"}


@router.get("/{quotation_id}/download")
async def download_quotation(
    quotation_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)
):
    quotation = _get_quotation_or_404(db, quotation_id)
    content = export_quotation_xlsx(quotation)
    filename = quotation_export_filename(quotation)
    logger.info("quotation_exported", quotation_id=quotation.id, size=len(content))
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
