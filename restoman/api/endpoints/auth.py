"""Authentication endpoints (API JWT)."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restoman.core.config import Settings
from restoman.core.security import create_access_token, get_current_user, get_settings, require_roles
from restoman.db.session import get_db
from restoman.models.user import User
from restoman.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserEnvelope,
    UserPublic,
)
from restoman.services.account_service import authenticate_user, register_user

router: APIRouter = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> LoginResponse:
    user = authenticate_user(db, payload.username, payload.password)
    token = create_access_token(
        data={"sub": str(user.id), "username": user.username, "role": user.role},
        settings=settings,
    )
    return LoginResponse(token=token, user=UserPublic.model_validate(user))


@router.post("/register", response_model=RegisterResponse)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    _: User = Depends(require_roles("admin")),
) -> RegisterResponse:
    user = register_user(
        db,
        username=payload.username,
        password=payload.password,
        role=payload.role,
        status=payload.status,
    )
    return RegisterResponse(user=UserPublic.model_validate(user))


@router.get("/me", response_model=UserEnvelope)
def me(current_user: User = Depends(get_current_user)) -> UserEnvelope:
    return UserEnvelope(user=UserPublic.model_validate(current_user))
