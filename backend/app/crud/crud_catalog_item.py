"""CRUD operations for catalog items."""

from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.models.catalog_item import CatalogItem
from backend.app.schemas.catalog_item import CatalogItemCreate, CatalogItemUpdate

_REQUIRED_FIELDS = {"category", "name", "unit", "default_rate", "is_active"}


class CRUDCatalogItem:
    def create(self, db: Session, *, obj_in: CatalogItemCreate) -> CatalogItem:
        data = obj_in.model_dump()
        data["category"] = obj_in.category.value
        obj = CatalogItem(**data)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, item_id: int) -> Optional[CatalogItem]:
        return db.query(CatalogItem).filter(CatalogItem.id == item_id).first()

    def get_multi(self, db: Session, *, category: Optional[str] = None, active_only: bool = False) -> List[CatalogItem]:
        query = db.query(CatalogItem)
        if category:
            query = query.filter(CatalogItem.category == category)
        if active_only:
            query = query.filter(CatalogItem.is_active.is_(True))
        return query.order_by(CatalogItem.category.asc(), CatalogItem.name.asc()).all()

    def update(self, db: Session, *, db_obj: CatalogItem, obj_in: CatalogItemUpdate) -> CatalogItem:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if value is None and field in _REQUIRED_FIELDS:
                continue
            if field == "category":
                value = value.value
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: CatalogItem) -> None:
        db.delete(db_obj)
        db.commit()


catalog_item_crud = CRUDCatalogItem()
