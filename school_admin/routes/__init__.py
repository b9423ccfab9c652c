from .auth import router as auth_router
from .classes import router as classes_router
from .students import router as students_router
from .health import router as health_router

__all__ = [
    "auth_router",
    "classes_router",
    "students_router",
    "health_router",
]
