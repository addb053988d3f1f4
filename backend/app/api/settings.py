"""Key/value settings endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.setting import SettingRead, SettingUpdate
from backend.app.services.app_settings import get_settings_map, upsert_setting, validate_setting_value

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", response_model=dict[str, str])
async def read_settings(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_settings_map(db)


@router.patch("/", response_model=SettingRead)
async def update_setting(
    payload: SettingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        value = validate_setting_value(payload.key, str(payload.value))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return upsert_setting(db, payload.key, value, payload.description)
