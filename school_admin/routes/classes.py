from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path

from school_admin.core.dependencies import get_class_service, get_current_teacher_id
from school_admin.core.errors import InternalServerError
from school_admin.core.logging import logger
from school_admin.schemas import ClassCreate, ClassOut, ClassUpdate
from school_admin.services import ClassService

router = APIRouter(tags=["Classes"])


@router.post("/class")
async def create_class(
    payload: Optional[ClassCreate] = Body(default=None),
    teacher_id: str = Depends(get_current_teacher_id),
    class_service: ClassService = Depends(get_class_service)
) -> Dict[str, Any]:
    """Create a class. The referenced teacher does not have to exist."""
    try:
        new_class = await class_service.create_class(payload or ClassCreate())
    except Exception:
        logger.error("Error creating class", exc_info=True, extra={"user_id": teacher_id})
        raise InternalServerError()

    return {"class": ClassOut.document(new_class), "message": "Class added successfully"}


@router.put("/class/{class_id}")
async def update_class(
    class_id: str = Path(..., description="Class ID"),
    payload: Optional[ClassUpdate] = Body(default=None),
    teacher_id: str = Depends(get_current_teacher_id),
    class_service: ClassService = Depends(get_class_service)
) -> Dict[str, Any]:
    """Update a class; ``class`` is null when the id is unknown."""
    try:
        updated = await class_service.update_class(class_id, payload or ClassUpdate())
    except Exception:
        logger.error("Error updating class", exc_info=True, extra={"user_id": teacher_id})
        raise InternalServerError()

    return {"class": ClassOut.document(updated), "message": "Class updated successfully"}


@router.delete("/class/{class_id}")
async def delete_class(
    class_id: str = Path(..., description="Class ID"),
    teacher_id: str = Depends(get_current_teacher_id),
    class_service: ClassService = Depends(get_class_service)
) -> Dict[str, Any]:
    try:
        await class_service.delete_class(class_id)
    except Exception:
        logger.error("Error deleting class", exc_info=True, extra={"user_id": teacher_id})
        raise InternalServerError()

    return {"message": "Class deleted successfully"}


@router.get("/classes")
async def list_classes(
    teacher_id: str = Depends(get_current_teacher_id),
    class_service: ClassService = Depends(get_class_service)
) -> List[Dict[str, Any]]:
    """List all classes with their teacher resolved"""
    try:
        return await class_service.list_classes(depth=1)
    except Exception:
        logger.error("Error listing classes", exc_info=True, extra={"user_id": teacher_id})
        raise InternalServerError()
