# base.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String

from school_admin.core.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentModel(Base):
    """
    Base for the stored entities.
    Records reference each other by plain id columns only; there are no
    foreign key constraints, so a reference may point at nothing.
    """
    __abstract__ = True

    id = Column(String(36), primary_key=True, default=new_id)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)
