from typing import Optional

from .base import CamelModel, PayloadModel
from .enums import EntityStatus


class ClassCreate(PayloadModel):
    standard: Optional[str] = None
    section: Optional[str] = None
    teacher_id: Optional[str] = None


class ClassUpdate(PayloadModel):
    standard: Optional[str] = None
    section: Optional[str] = None
    status: Optional[EntityStatus] = None
    teacher_id: Optional[str] = None


class ClassOut(CamelModel):
    id: str
    standard: str
    section: str
    status: EntityStatus
    teacher_id: Optional[str] = None
