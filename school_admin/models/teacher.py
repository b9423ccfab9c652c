# teacher.py
from sqlalchemy import Column, Enum, String

from school_admin.schemas.enums import EntityStatus
from .base import DocumentModel


class Teacher(DocumentModel):
    __tablename__ = "teachers"

    name = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    address = Column(String, nullable=True)
    status = Column(Enum(EntityStatus), default=EntityStatus.ACTIVE, nullable=False)

    def __repr__(self):
        return f"<Teacher(id={self.id}, email={self.email})>"
