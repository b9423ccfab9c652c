from .base_service import BaseService
from .teacher_service import TeacherService
from .class_service import ClassService
from .student_service import StudentService

__all__ = [
    "BaseService",
    "TeacherService",
    "ClassService",
    "StudentService",
]
