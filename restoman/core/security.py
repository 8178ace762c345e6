"""Security utilities: password hashing, JWT auth and the cron gate."""

import hmac
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from restoman.core.config import Settings
from restoman.core.errors import ApiError
from restoman.db.session import get_db
from restoman.models.user import User
from restoman.services.user_service import get_user_by_id

logger = logging.getLogger(__name__)

pwd_context: CryptContext = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
bearer_scheme: HTTPBearer = HTTPBearer(auto_error=False)

CRON_TOKEN_HEADER: str = "x-cron-auth-token"


def get_settings(request: Request) -> Settings:
    """Return the settings instance the application was built with."""
    return request.app.state.settings


def get_password_hash(password: str) -> str:
    """Hash a plaintext password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict[str, Any], settings: Settings) -> str:
    """Create a signed JWT access token from payload data."""
    to_encode: dict[str, Any] = data.copy()
    expire: datetime = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expire_minutes)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings) -> dict[str, Any]:
    """Decode and validate a JWT token payload."""
    try:
        payload: dict[str, Any] = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise ApiError(401, "Invalid token") from exc
    return payload


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """Resolve the authenticated user from the Authorization header."""
    if credentials is None or not credentials.credentials:
        raise ApiError(401, "No token provided")

    payload: dict[str, Any] = verify_token(credentials.credentials, settings)
    try:
        user_id: int = int(payload.get("sub"))
    except (TypeError, ValueError) as exc:
        raise ApiError(401, "Invalid token") from exc

    user: User | None = get_user_by_id(db=db, user_id=user_id)
    if user is None:
        raise ApiError(401, "User not found")
    return user


def require_roles(*roles: str) -> Callable[..., User]:
    """Build a dependency that admits only users holding one of ``roles``."""

    allowed = {role.lower() for role in roles}

    def _checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            raise ApiError(403, "Insufficient permissions")
        return current_user

    return _checker


def is_cron_request_authorized(settings: Settings, token: bytes | str | None) -> bool:
    """Compare the supplied cron token with the configured secret.

    ``token`` is either the raw header bytes or a text value; text is
    compared by its UTF-8 encoding.

    With no secret configured every request passes, unless
    ``cron_require_secret`` is set, in which case every request is rejected.
    """
    secret = settings.cron_secret
    if not secret:
        return not settings.cron_require_secret
    if token is None:
        return False
    if isinstance(token, str):
        token = token.encode("utf-8")
    return hmac.compare_digest(token, secret.encode("utf-8"))


def require_cron_token(request: Request, settings: Settings = Depends(get_settings)) -> None:
    """Reject cron invocations whose token does not match the secret."""
    header_name = CRON_TOKEN_HEADER.encode("latin-1")
    token = next((value for name, value in request.headers.raw if name.lower() == header_name), None)
    if not is_cron_request_authorized(settings, token):
        logger.warning("[CRON] Rejected request with invalid or missing %s header.", CRON_TOKEN_HEADER)
        raise ApiError(401, "Unauthorized")
