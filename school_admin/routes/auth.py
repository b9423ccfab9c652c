from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from school_admin.core.dependencies import get_teacher_service
from school_admin.core.errors import BaseAPIError, InternalServerError
from school_admin.core.logging import logger
from school_admin.core.validation import validate_login, validate_registration
from school_admin.schemas import TeacherOut
from school_admin.services import TeacherService

router = APIRouter(tags=["Authentication"])


@router.post("/register")
async def register(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    teacher_service: TeacherService = Depends(get_teacher_service)
) -> Dict[str, Any]:
    """Register a teacher account"""
    registration = validate_registration(payload).unwrap()

    try:
        teacher = await teacher_service.register_teacher(registration)
    except BaseAPIError:
        raise
    except Exception:
        logger.error("Error registering teacher", exc_info=True)
        raise InternalServerError()

    return {"user": TeacherOut.document(teacher), "message": "Registration is done successfully"}


@router.post("/login")
async def login(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    teacher_service: TeacherService = Depends(get_teacher_service)
) -> Dict[str, Any]:
    """Authenticate a teacher and issue a bearer token"""
    credentials = validate_login(payload).unwrap()

    try:
        teacher, token = await teacher_service.authenticate(credentials)
    except BaseAPIError:
        raise
    except Exception:
        logger.error("Error during login", exc_info=True)
        raise InternalServerError()

    return {"user": TeacherOut.document(teacher), "token": token, "message": "Login successful"}
