from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path

from school_admin.core.dependencies import get_current_teacher_id, get_student_service
from school_admin.core.errors import InternalServerError
from school_admin.core.logging import logger
from school_admin.schemas import StudentCreate, StudentOut, StudentUpdate
from school_admin.services import StudentService

router = APIRouter(tags=["Students"])


@router.post("/student")
async def create_student(
    payload: Optional[StudentCreate] = Body(default=None),
    teacher_id: str = Depends(get_current_teacher_id),
    student_service: StudentService = Depends(get_student_service)
) -> Dict[str, Any]:
    """Create a student. The referenced class does not have to exist."""
    try:
        student = await student_service.create_student(payload or StudentCreate())
    except Exception:
        logger.error("Error creating student", exc_info=True, extra={"user_id": teacher_id})
        raise InternalServerError()

    return {"student": StudentOut.document(student), "message": "Student added successfully"}


@router.put("/student/{student_id}")
async def update_student(
    student_id: str = Path(..., description="Student ID"),
    payload: Optional[StudentUpdate] = Body(default=None),
    teacher_id: str = Depends(get_current_teacher_id),
    student_service: StudentService = Depends(get_student_service)
) -> Dict[str, Any]:
    try:
        student = await student_service.update_student(student_id, payload or StudentUpdate())
    except Exception:
        logger.error("Error updating student", exc_info=True, extra={"user_id": teacher_id})
        raise InternalServerError()

    return {"student": StudentOut.document(student), "message": "Student updated successfully"}


@router.delete("/student/{student_id}")
async def delete_student(
    student_id: str = Path(..., description="Student ID"),
    teacher_id: str = Depends(get_current_teacher_id),
    student_service: StudentService = Depends(get_student_service)
) -> Dict[str, Any]:
    try:
        await student_service.delete_student(student_id)
    except Exception:
        logger.error("Error deleting student", exc_info=True, extra={"user_id": teacher_id})
        raise InternalServerError()

    return {"message": "Student deleted successfully"}


@router.get("/students")
async def list_students(
    teacher_id: str = Depends(get_current_teacher_id),
    student_service: StudentService = Depends(get_student_service)
) -> List[Dict[str, Any]]:
    """List all students with class and class teacher resolved"""
    try:
        return await student_service.list_students(depth=2)
    except Exception:
        logger.error("Error listing students", exc_info=True, extra={"user_id": teacher_id})
        raise InternalServerError()


@router.get("/public/students")
async def list_public_students(
    student_service: StudentService = Depends(get_student_service)
) -> List[Dict[str, Any]]:
    """Same listing as /students, without authentication"""
    try:
        return await student_service.list_students(depth=2)
    except Exception:
        logger.error("Error listing public students", exc_info=True)
        raise InternalServerError()
