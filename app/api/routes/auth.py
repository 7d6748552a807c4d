from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Request, status
from sqlalchemy.orm import Session

from app.controllers.user import create_user, login_user
from app.core.config import Settings, get_settings
from app.core.exceptions import BadRequestError
from app.core.rate_limit import LOGIN_RATE_LIMIT, limiter
from app.core.security import extract_bearer_token, get_current_user, resolve_token_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.token import LoginOut
from app.schemas.user import LoginRequest, UserCreate, UserOut

router = APIRouter()


@router.post("/login", response_model=ApiResponse[LoginOut])
@limiter.limit(LOGIN_RATE_LIMIT)
def login(
    request: Request,
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token, user = login_user(db, credentials, settings)
    return {
        "message": "User connected successfully",
        "data": LoginOut(token=token, user=UserOut.model_validate(user)),
    }


@router.post("/register", response_model=ApiResponse[UserOut], status_code=status.HTTP_201_CREATED)
def register(
    user: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_user = create_user(db, user)
    return {"message": "User created successfully", "data": UserOut.model_validate(db_user)}


@router.get("/token", response_model=ApiResponse[UserOut])
def verify_token(
    authorization: Optional[str] = Header(None),
    auth: Optional[str] = Query(None, deprecated=True, description="Use the Authorization header instead"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token = extract_bearer_token(authorization) or auth
    if not token:
        raise BadRequestError("Token parameter is required")

    user = resolve_token_user(db, token, settings)
    return {"message": "Token valid", "data": UserOut.model_validate(user)}
