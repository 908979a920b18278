# models.py
from sqlalchemy import Column, String, Text, DateTime, Uuid, ForeignKey, func
from sqlalchemy.orm import relationship
from db import Base, AUTH_SCHEMA

# jobs table lives in models1 but has to be registered with Base before the relationships resolve
from models1.jobs import Job  # noqa: F401

_AUTH_USERS = f"{AUTH_SCHEMA}.users" if AUTH_SCHEMA else "users"


class AuthUser(Base):
    """
    Identity provider's user table. We never write to it, it's only mapped
    so profiles.id can reference it (and cascade when an account is deleted).
    """
    __tablename__ = "users"
    __table_args__ = {"schema": AUTH_SCHEMA} if AUTH_SCHEMA else {}

    id = Column(Uuid, primary_key=True)


class Profile(Base):
    __tablename__ = "profiles"

    # same primary key as the identity provider's user
    id = Column(Uuid, ForeignKey(f"{_AUTH_USERS}.id", ondelete="CASCADE"), primary_key=True)
    display_name = Column(String, nullable=True)
    avatar_url = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    jobs = relationship(
        "Job",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
