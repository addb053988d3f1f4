"""Token issuance and the current-user lookup used by the quotation UI."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.security import create_access_token, verify_password
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.login import LoginRequest, TokenResponse
from backend.app.schemas.user import UserRead

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _reject(reason: str, email: str, detail: str = "Invalid credentials"):
    logger.warning("login_rejected", email=email, reason=reason)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.post("/login", response_model=TokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == credentials.email).first()
    if not user or not user.hashed_password:
        raise _reject("unknown_user", credentials.email)
    if not user.is_active:
        raise _reject("inactive", credentials.email, detail="User is inactive")
    if not verify_password(credentials.password, user.hashed_password):
        raise _reject("bad_password", credentials.email)

    logger.info("user_logged_in", user_id=user.id)
    return TokenResponse(access_token=create_access_token(user.id))


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
