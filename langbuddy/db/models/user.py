"""User database model."""
import uuid

from sqlalchemy import Boolean, Column, String
from sqlalchemy.sql import func

from langbuddy.db.base import Base
from langbuddy.db.types import UTCDateTime


class User(Base):
    """Represents an authenticated identity that owns learning data."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(255))

    created_at = Column(UTCDateTime, server_default=func.now())
    updated_at = Column(UTCDateTime, server_default=func.now(), onupdate=func.now())
    is_active = Column(Boolean, default=True)
