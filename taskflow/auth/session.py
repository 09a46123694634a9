# taskflow/auth/session.py

from datetime import datetime, timedelta, timezone
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, HTTPException, Request, Response
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from taskflow.database import get_db
from taskflow.auth.user_service import get_user_by_id
from taskflow.models.user import User

# ================= ENV =================
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env"))

SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
SESSION_EXPIRE_MINUTES = int(os.getenv("SESSION_EXPIRE_MINUTES", str(60 * 24 * 7)))
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"

if not SECRET_KEY:
    raise RuntimeError("SECRET_KEY missing in .env!")

SESSION_COOKIE_NAME = "__session"
REMEMBER_MAX_AGE = 60 * 60 * 24 * 7

logger = logging.getLogger("taskflow.session")


# ================= TOKEN =================
def create_session_token(user_id: int, minutes: int = SESSION_EXPIRE_MINUTES) -> str:
    exp = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    return jwt.encode({"sub": str(user_id), "exp": exp}, SECRET_KEY, algorithm=ALGORITHM)


def decode_session_token(token: str) -> Optional[int]:
    try:
        data = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        return int(data["sub"])
    except (JWTError, KeyError, ValueError):
        return None


# ================= COOKIE =================
def create_user_session(response: Response, user_id: int, remember: bool = False) -> None:
    """Attach a signed session cookie; ``remember`` keeps it for seven days."""
    response.set_cookie(
        SESSION_COOKIE_NAME,
        create_session_token(user_id),
        max_age=REMEMBER_MAX_AGE if remember else None,
        httponly=True,
        samesite="lax",
        secure=SESSION_COOKIE_SECURE,
        path="/",
    )


def destroy_user_session(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")


def _expired_cookie_header() -> str:
    response = Response()
    destroy_user_session(response)
    return response.headers["set-cookie"]


# ================= GUARDS =================
def get_user_id(request: Request) -> Optional[int]:
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if not token:
        return None
    return decode_session_token(token)


def get_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    user_id = get_user_id(request)
    if user_id is None:
        return None
    return get_user_by_id(db, user_id)


def require_user_id(request: Request) -> int:
    user_id = get_user_id(request)
    if user_id is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return user_id


def require_user(
    user_id: int = Depends(require_user_id),
    db: Session = Depends(get_db),
) -> User:
    user = get_user_by_id(db, user_id)
    if not user:
        # stale cookie for a deleted user
        logger.info("session_user_missing", extra={"user_id": user_id})
        raise HTTPException(
            status_code=401,
            detail="Authentication required",
            headers={"set-cookie": _expired_cookie_header()},
        )
    return user
