"""User service operations."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from restoman.models.user import User, normalize_user_role, normalize_user_status


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.scalar(select(User).where(User.username == username).limit(1))


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_any_admin(db: Session) -> User | None:
    return db.scalar(select(User).where(User.role == "admin").limit(1))


def create_user(
    db: Session,
    username: str,
    hashed_password: str,
    role: str,
    status: str = "active",
) -> User:
    user = User(
        username=username,
        password_hash=hashed_password,
        role=normalize_user_role(role),
        status=normalize_user_status(status),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
