# taskflow/auth/user_service.py

from __future__ import annotations

import logging
from typing import Optional

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskflow.models.user import Password, User
from taskflow.schemas.auth_schema import UserRead

logger = logging.getLogger("taskflow.auth")

# bcrypt with a fixed cost factor
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


class UserNotFoundError(Exception):
    pass


class DuplicateEmailError(Exception):
    pass


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, email: str, password: str) -> User:
    user = User(email=email, password=Password(hash=hash_password(password)))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # unique email lost a race with a concurrent join
        db.rollback()
        raise DuplicateEmailError(email)
    db.refresh(user)

    logger.info("user_created", extra={"user_id": user.id})
    return user


def delete_user_by_email(db: Session, email: str) -> None:
    user = get_user_by_email(db, email)
    if not user:
        raise UserNotFoundError(email)

    user_id = user.id
    db.delete(user)
    db.commit()
    logger.info("user_deleted", extra={"user_id": user_id})


def verify_login(db: Session, email: str, password: str) -> Optional[UserRead]:
    """Check an email/password pair.

    Returns the user without its password hash, or ``None`` when the email is
    unknown, the user has no password, or the password does not match.
    """
    user = get_user_by_email(db, email)
    if not user or not user.password:
        return None

    if not verify_password(password, user.password.hash):
        logger.info("login_rejected", extra={"user_id": user.id})
        return None

    return UserRead.model_validate(user)
