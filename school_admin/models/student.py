from sqlalchemy import Column, String

from .base import DocumentModel


class Student(DocumentModel):
    __tablename__ = "students"

    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    # weak reference to classes.id
    class_id = Column(String(36), nullable=True, index=True)
    parent_name = Column(String, nullable=True)
    address = Column(String, nullable=True)
    city = Column(String, nullable=True)

    def __repr__(self):
        return f"<Student(first_name={self.first_name}, last_name={self.last_name})>"
