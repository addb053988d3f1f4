"""CRUD operations for customers."""

from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.models.customer import Customer
from backend.app.models.quotation import Quotation
from backend.app.schemas.customer import CustomerCreate, CustomerUpdate


class CRUDCustomer:
    def create(self, db: Session, *, obj_in: CustomerCreate) -> Customer:
        obj = Customer(**obj_in.model_dump())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, customer_id: int) -> Optional[Customer]:
        return db.query(Customer).filter(Customer.id == customer_id).first()

    def get_multi(self, db: Session) -> List[Customer]:
        return db.query(Customer).order_by(Customer.company_name.asc(), Customer.id.asc()).all()

    def update(self, db: Session, *, db_obj: Customer, obj_in: CustomerUpdate) -> Customer:
        update_data = obj_in.model_dump(exclude_unset=True)
        if update_data.get("company_name") is None:
            update_data.pop("company_name", None)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def has_quotations(self, db: Session, *, customer_id: int) -> bool:
        return db.query(Quotation.id).filter(Quotation.customer_id == customer_id).first() is not None

    def delete(self, db: Session, *, db_obj: Customer) -> None:
        db.delete(db_obj)
        db.commit()


customer_crud = CRUDCustomer()
