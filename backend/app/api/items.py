"""Catalog item endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_catalog_item import catalog_item_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.catalog_item import CatalogItemCreate, CatalogItemRead, CatalogItemUpdate, ItemCategory

router = APIRouter(prefix="/items", tags=["items"])


@router.get("/", response_model=list[CatalogItemRead])
async def list_items(
    category: ItemCategory | None = None,
    active: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return catalog_item_crud.get_multi(db, category=category.value if category else None, active_only=active)


@router.post("/", response_model=CatalogItemRead, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_in: CatalogItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return catalog_item_crud.create(db, obj_in=item_in)


@router.get("/{item_id}", response_model=CatalogItemRead)
async def get_item(item_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    item = catalog_item_crud.get(db, item_id=item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item


@router.patch("/{item_id}", response_model=CatalogItemRead)
async def update_item(
    item_id: int,
    item_in: CatalogItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    item = catalog_item_crud.get(db, item_id=item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return catalog_item_crud.update(db, db_obj=item, obj_in=item_in)


@router.delete("/{item_id}")
async def delete_item(item_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    item = catalog_item_crud.get(db, item_id=item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    catalog_item_crud.delete(db, db_obj=item)
    return {"message": "Item deleted successfully"}
