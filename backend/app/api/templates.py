from fastapi import APIRouter, Depends

from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.catalog_item import ItemCategory
from backend.app.schemas.scope_template import ScopeTemplate
from backend.app.services.scope_templates import list_scope_templates

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("/", response_model=list[ScopeTemplate])
async def get_scope_templates(category: ItemCategory | None = None, current_user: User = Depends(get_current_user)):
    return list_scope_templates(category.value if category else None)
