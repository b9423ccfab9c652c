from .base import DocumentModel
from .teacher import Teacher
from .class_ import Class
from .student import Student

__all__ = [
    'DocumentModel',
    'Teacher',
    'Class',
    'Student',
]
