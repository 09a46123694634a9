# taskflow/auth/validation.py

from typing import Optional

import email_validator

from taskflow.schemas.auth_schema import FieldErrors

MIN_PASSWORD_LENGTH = 8

DEFAULT_REDIRECT = "/dashboard"


def validate_email(email) -> bool:
    if not isinstance(email, str) or not email:
        return False
    try:
        email_validator.validate_email(email, check_deliverability=False)
    except email_validator.EmailNotValidError:
        return False
    return True


def validate_credentials(email, password) -> Optional[FieldErrors]:
    """Shape checks shared by join and login; first failure wins."""
    if not validate_email(email):
        return FieldErrors(email="L'adresse email est invalide")

    if not isinstance(password, str) or len(password) == 0:
        return FieldErrors(password="Le mot de passe est requis")

    if len(password) < MIN_PASSWORD_LENGTH:
        return FieldErrors(
            password=f"Le mot de passe doit contenir au moins {MIN_PASSWORD_LENGTH} caractères"
        )

    return None


def safe_redirect(to, default: str = DEFAULT_REDIRECT) -> str:
    # only same-site absolute paths; "//host" would leave the site
    if not to or not isinstance(to, str):
        return default
    if not to.startswith("/") or to.startswith("//"):
        return default
    return to
