"""User model"""

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin, new_id


class User(Base, TimestampMixin):
    """User table. `password` only ever holds a bcrypt hash."""

    __tablename__ = "users"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    metric = Column(Boolean, nullable=False, default=False, server_default="0")

    # Relationships
    locations = relationship(
        "Location",
        back_populates="user",
        order_by="[Location.position, Location.created_at, Location.id]",
        cascade="all, delete-orphan",
        lazy="selectin"
    )

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
