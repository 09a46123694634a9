# taskflow/schemas/auth_schema.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


# --------- Form bodies ---------
# Fields are optional: taskflow.auth.validation checks them and answers
# 400 with field-level errors.
class JoinRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    redirect_to: Optional[str] = None


class LoginRequest(JoinRequest):
    remember: bool = False


# --------- Responses ---------
class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    created_at: datetime
    updated_at: datetime


class FieldErrors(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class FormErrorResponse(BaseModel):
    errors: FieldErrors


class AuthResponse(BaseModel):
    redirect_to: str
    user: UserRead
