# taskflow/auth/auth_router.py

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from taskflow.database import get_db
from taskflow.auth.session import (
    create_user_session,
    destroy_user_session,
    get_user_id,
    require_user,
)
from taskflow.auth.user_service import (
    DuplicateEmailError,
    create_user,
    get_user_by_email,
    verify_login,
)
from taskflow.auth.validation import safe_redirect, validate_credentials
from taskflow.models.user import User
from taskflow.schemas.auth_schema import (
    AuthResponse,
    FieldErrors,
    FormErrorResponse,
    JoinRequest,
    LoginRequest,
    UserRead,
)

router = APIRouter(tags=["auth"])
logger = logging.getLogger("taskflow.auth")

DUPLICATE_EMAIL_ERROR = FieldErrors(email="Un utilisateur avec cette adresse email existe déjà")


def _form_error(errors: FieldErrors) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=FormErrorResponse(errors=errors).model_dump(),
    )


# ================= JOIN =================
@router.get("/join")
def join_page(request: Request):
    if get_user_id(request) is not None:
        return {"redirect_to": "/"}
    return {}


@router.post(
    "/join",
    status_code=201,
    response_model=AuthResponse,
    responses={400: {"model": FormErrorResponse}},
)
def join(data: JoinRequest, response: Response, db: Session = Depends(get_db)):
    errors = validate_credentials(data.email, data.password)
    if errors:
        return _form_error(errors)

    if get_user_by_email(db, data.email):
        return _form_error(DUPLICATE_EMAIL_ERROR)

    try:
        user = create_user(db, data.email, data.password)
    except DuplicateEmailError:
        return _form_error(DUPLICATE_EMAIL_ERROR)

    create_user_session(response, user.id, remember=False)

    return AuthResponse(
        redirect_to=safe_redirect(data.redirect_to),
        user=UserRead.model_validate(user),
    )


# ================= LOGIN / LOGOUT =================
@router.get("/login")
def login_page(request: Request):
    if get_user_id(request) is not None:
        return {"redirect_to": "/"}
    return {}


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": FormErrorResponse}},
)
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    errors = validate_credentials(data.email, data.password)
    if errors:
        return _form_error(errors)

    user = verify_login(db, data.email, data.password)
    if not user:
        # same answer for unknown email and wrong password
        return _form_error(FieldErrors(email="Email ou mot de passe invalide"))

    create_user_session(response, user.id, remember=data.remember)
    logger.info("login_succeeded", extra={"user_id": user.id, "remember": data.remember})

    return AuthResponse(redirect_to=safe_redirect(data.redirect_to), user=user)


@router.post("/logout")
def logout(response: Response):
    destroy_user_session(response)
    return {"redirect_to": "/"}


@router.get("/me", response_model=UserRead)
def get_current_user(user: User = Depends(require_user)):
    return user
