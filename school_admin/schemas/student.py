from typing import Optional

from .base import CamelModel, PayloadModel


class StudentCreate(PayloadModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    class_id: Optional[str] = None
    parent_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None


class StudentUpdate(StudentCreate):
    pass


class StudentOut(CamelModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    class_id: Optional[str] = None
    parent_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
