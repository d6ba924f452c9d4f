"""
SQLAlchemy ORM Model Definitions

Defines the database table structure for the system:
- keywords: Keyword Records Table
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy ORM Base Class"""
    pass


def generate_keyword_id() -> str:
    """Generate an opaque public identifier for a keyword record"""
    return uuid.uuid4().hex


class Keyword(Base):
    """
    Keyword Records Table

    One row per (username, channel) submission. Rows are inserted and deleted,
    never updated.
    """
    __tablename__ = "keywords"

    # Internal insertion sequence, defines storage order
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Public opaque identifier
    id: Mapped[str] = mapped_column(
        String(32), nullable=False, unique=True, index=True, default=generate_keyword_id
    )
    # Submitting username
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    # Channel names (JSON array, one element per stored record)
    channels: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    # Status flags
    available: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    unavailable: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # Creator
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)
    # Creation Time (client supplied, UTC naive)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, default=None)
