from typing import Optional

from .base import CamelModel
from .enums import EntityStatus


class TeacherOut(CamelModel):
    # password_hash is deliberately absent
    id: str
    name: Optional[str] = None
    email: str
    address: Optional[str] = None
    status: EntityStatus
