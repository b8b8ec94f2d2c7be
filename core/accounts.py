"""
Accounts - user identity for the flashcard app.

Sign-up, sign-in and profile updates against the users table.
Passwords are hashed with bcrypt; the hash never leaves this module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import bcrypt
from pydantic import BaseModel, EmailStr, Field, field_validator
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.flashcards.database import get_session
from core.flashcards.errors import StorageError
from core.flashcards.models import Character as CharacterModel, User as UserModel

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72  # bcrypt input limit


class AccountError(Exception):
    """Base class for account errors."""


class AccountExistsError(AccountError):
    """Raised when signing up with an email that is already registered."""


class InvalidCredentialsError(AccountError):
    """Raised when the email or password is wrong."""


class AccountNotFoundError(AccountError):
    """Raised when a user id does not exist."""


# ---- Forms ----

def _check_password_bytes(password: str) -> str:
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password


class SignUpForm(BaseModel):
    name: str = Field(..., min_length=MIN_NAME_LENGTH)
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return (value or "").strip()

    @field_validator("email", mode="after")
    @classmethod
    def _lower_email(cls, value):
        return str(value).lower()

    @field_validator("password", mode="after")
    @classmethod
    def _password_fits_bcrypt(cls, value):
        return _check_password_bytes(value)


class SignInForm(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="after")
    @classmethod
    def _lower_email(cls, value):
        return str(value).lower()

    @field_validator("password", mode="after")
    @classmethod
    def _password_fits_bcrypt(cls, value):
        return _check_password_bytes(value)


@dataclass(frozen=True)
class User:
    """
    Public view of an account.
    """
    id: str
    email: str
    name: str
    created_at: Optional[datetime] = None


def _to_user(row: UserModel) -> User:
    return User(id=row.id, email=row.email, name=row.name, created_at=row.created_at)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


# ---- Operations ----

def sign_up(email: str, password: str, name: str) -> User:
    """
    Register a new account.

    Raises:
        pydantic.ValidationError: If the name, email or password is invalid
        AccountExistsError: If the email is already registered
    """
    form = SignUpForm(name=name, email=email, password=password)

    session = get_session()
    try:
        if session.query(UserModel.id).filter(UserModel.email == form.email).first():
            raise AccountExistsError(f"Email already registered: {form.email}")

        row = UserModel(
            email=form.email,
            name=form.name,
            password_hash=hash_password(form.password),
        )
        session.add(row)
        session.commit()
        logger.info("User registered: %s (ID: %s)", row.email, row.id)
        return _to_user(row)
    except IntegrityError as exc:
        session.rollback()
        raise AccountExistsError(f"Email already registered: {form.email}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Error during registration: %s", exc, exc_info=True)
        raise StorageError("Error during registration") from exc
    finally:
        session.close()


def sign_in(email: str, password: str) -> User:
    """
    Check credentials and return the matching account.

    Raises:
        pydantic.ValidationError: If the email is malformed or password empty
        InvalidCredentialsError: If no account matches
    """
    form = SignInForm(email=email, password=password)

    session = get_session()
    try:
        row = session.query(UserModel).filter(UserModel.email == form.email).first()
        if row is None or not verify_password(form.password, row.password_hash):
            raise InvalidCredentialsError("Invalid email or password")
        logger.info("User logged in: %s (ID: %s)", row.email, row.id)
        return _to_user(row)
    except SQLAlchemyError as exc:
        logger.error("Error during sign-in: %s", exc, exc_info=True)
        raise StorageError("Error during sign-in") from exc
    finally:
        session.close()


def get_user(user_id: str) -> Optional[User]:
    """Get an account by id, or None."""
    session = get_session()
    try:
        row = session.get(UserModel, user_id)
        return _to_user(row) if row is not None else None
    except SQLAlchemyError as exc:
        logger.error("Error fetching user: %s", exc, exc_info=True)
        raise StorageError("Error fetching user") from exc
    finally:
        session.close()


def get_user_by_email(email: str) -> Optional[User]:
    """Get an account by email (case-insensitive), or None."""
    session = get_session()
    try:
        row = session.query(UserModel).filter(UserModel.email == email.strip().lower()).first()
        return _to_user(row) if row is not None else None
    except SQLAlchemyError as exc:
        logger.error("Error fetching user: %s", exc, exc_info=True)
        raise StorageError("Error fetching user") from exc
    finally:
        session.close()


def update_user(
    user_id: str,
    name: Optional[str] = None,
    password: Optional[str] = None
) -> User:
    """
    Update display name and/or password.

    Raises:
        ValueError: If the new name or password is too short
        AccountNotFoundError: If the account does not exist
    """
    if name is not None:
        name = name.strip()
        if len(name) < MIN_NAME_LENGTH:
            raise ValueError(f"Name must be at least {MIN_NAME_LENGTH} characters")
    if password is not None and len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if password is not None:
        _check_password_bytes(password)

    session = get_session()
    try:
        row = session.get(UserModel, user_id)
        if row is None:
            raise AccountNotFoundError(f"User not found: {user_id}")
        if name is not None:
            row.name = name
        if password is not None:
            row.password_hash = hash_password(password)
        session.commit()
        return _to_user(row)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Error updating user: %s", exc, exc_info=True)
        raise StorageError("Error updating user") from exc
    finally:
        session.close()


def delete_user(user_id: str) -> None:
    """
    Delete an account and every character it owns.
    """
    session = get_session()
    try:
        row = session.get(UserModel, user_id)
        if row is None:
            raise AccountNotFoundError(f"User not found: {user_id}")
        session.query(CharacterModel).filter(
            CharacterModel.user_id == user_id
        ).delete(synchronize_session=False)
        session.delete(row)
        session.commit()
        logger.info("User deleted: %s", user_id)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Error deleting user: %s", exc, exc_info=True)
        raise StorageError("Error deleting user") from exc
    finally:
        session.close()
