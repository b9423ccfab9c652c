from sqlalchemy import Column, Enum, String

from school_admin.schemas.enums import EntityStatus
from .base import DocumentModel


class Class(DocumentModel):
    __tablename__ = "classes"

    standard = Column(String, nullable=False)
    section = Column(String, nullable=False)
    status = Column(Enum(EntityStatus), default=EntityStatus.ACTIVE, nullable=False)
    # weak reference to teachers.id
    teacher_id = Column(String(36), nullable=True, index=True)

    def __repr__(self):
        return f"<Class(standard={self.standard}, section={self.section})>"
