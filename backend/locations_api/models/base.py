"""Declarative base and shared column mixins"""

from uuid import uuid4

from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_id() -> str:
    """Opaque identifier assigned by the store"""
    return uuid4().hex


class TimestampMixin:
    """Adds created_at / updated_at columns maintained by the database"""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )
