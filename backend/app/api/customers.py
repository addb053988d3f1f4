"""Customer directory endpoints."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_customer import customer_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=list[CustomerRead])
async def list_customers(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return customer_crud.get_multi(db)


@router.post("/", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_in: CustomerCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = customer_crud.create(db, obj_in=customer_in)
    logger.info("customer_created", customer_id=customer.id, user_id=current_user.id)
    return customer


@router.get("/{customer_id}", response_model=CustomerRead)
async def get_customer(customer_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    customer = customer_crud.get(db, customer_id=customer_id)
    if not customer:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.patch("/{customer_id}", response_model=CustomerRead)
async def update_customer(
    customer_id: int,
    customer_in: CustomerUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = customer_crud.get(db, customer_id=customer_id)
    if not customer:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer_crud.update(db, db_obj=customer, obj_in=customer_in)


@router.delete("/{customer_id}")
async def delete_customer(customer_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    customer = customer_crud.get(db, customer_id=customer_id)
    if not customer:
        logger.warning("customer_not_found_for_deletion", customer_id=customer_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    if customer_crud.has_quotations(db, customer_id=customer_id):
        raise HTTPException(status_code=400, detail="Customer has quotations and cannot be deleted")
    company_name = customer.company_name
    customer_crud.delete(db, db_obj=customer)
    logger.info("customer_deleted", customer_id=customer_id, company_name=company_name)
    return {"message": "Customer deleted successfully"}
