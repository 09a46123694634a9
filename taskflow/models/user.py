# taskflow/models/user.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from taskflow.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # hash kept apart from the user row
    password = relationship(
        "Password",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )


class Password(Base):
    __tablename__ = "passwords"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    hash = Column(String(255), nullable=False)

    user = relationship("User", back_populates="password")
