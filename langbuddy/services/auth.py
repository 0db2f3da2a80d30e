"""Authentication service layer."""
from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from langbuddy.core.security import (
    create_access_token,
    create_refresh_token,
    hash_password,
    verify_password,
)
from langbuddy.db.models.user import User
from langbuddy.schemas import Token, UserCreate
from langbuddy.utils.exceptions import EmailAlreadyExistsError, UnauthorizedError


class AuthService:
    """Encapsulates user registration and authentication logic."""

    def __init__(self, db: Session):
        self.db = db

    def register_user(self, payload: UserCreate) -> User:
        """Create a new user in the database."""

        existing_user = self.db.scalar(select(User).where(User.email == payload.email))
        if existing_user:
            raise EmailAlreadyExistsError("A user with this email already exists.")

        user = User(
            email=payload.email,
            hashed_password=hash_password(payload.password),
            full_name=payload.full_name,
            is_active=True,
        )

        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise EmailAlreadyExistsError("A user with this email already exists.") from exc
        self.db.refresh(user)
        logger.info(f"Registered user {user.id}")
        return user

    def authenticate_user(self, email: str, password: str) -> User:
        """Validate credentials and return the associated user."""

        user = self.db.scalar(select(User).where(User.email == email))
        if not user or not verify_password(password, user.hashed_password):
            raise UnauthorizedError("Incorrect email or password")
        return user

    def create_tokens(self, user: User) -> Token:
        """Generate access and refresh tokens for a user."""

        access = create_access_token(user.id)
        refresh = create_refresh_token(user.id)
        return Token(access_token=access, refresh_token=refresh)
