"""Location model"""

from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin, new_id


class Location(Base, TimestampMixin):
    """A named location saved by a user"""

    __tablename__ = "locations"

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    position = Column(Integer, nullable=False, default=0)  # insertion order within the user

    user = relationship("User", back_populates="locations")

    __table_args__ = (
        Index("ix_location_user_position", "user_id", "position"),
    )

    def __repr__(self):
        return f"<Location(id={self.id}, user_id={self.user_id}, name='{self.name}')>"
