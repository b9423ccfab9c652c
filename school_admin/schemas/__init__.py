# school_admin/schemas/__init__.py

from .enums import EntityStatus
from .auth import TeacherRegistration, LoginCredentials
from .teacher import TeacherOut
from .class_ import ClassCreate, ClassUpdate, ClassOut
from .student import StudentCreate, StudentUpdate, StudentOut

__all__ = [
    "EntityStatus",
    "TeacherRegistration",
    "LoginCredentials",
    "TeacherOut",
    "ClassCreate",
    "ClassUpdate",
    "ClassOut",
    "StudentCreate",
    "StudentUpdate",
    "StudentOut",
]
