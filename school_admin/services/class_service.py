from typing import Any, Dict, Iterable, List, Optional, Sequence

from sqlalchemy import delete

from school_admin.core.logging import logger
from school_admin.models import Class, Teacher
from school_admin.schemas import ClassCreate, ClassOut, ClassUpdate, TeacherOut
from .base_service import BaseService

# Columns the store requires; an explicit null in an update leaves them as they are
REQUIRED_FIELDS = {"standard", "section", "status"}


class ClassService(BaseService):
    async def create_class(self, payload: ClassCreate) -> Class:
        """Store a class as given; the teacher reference is not checked."""
        new_class = Class(
            standard=payload.standard,
            section=payload.section,
            teacher_id=payload.teacher_id,
        )
        async with self.transaction():
            self.db.add(new_class)

        logger.info(f"Class created: {new_class.id}")
        return new_class

    async def update_class(self, class_id: str, payload: ClassUpdate) -> Optional[Class]:
        """Merge the given fields into a class. Returns None for an unknown id."""
        existing = await self.db.get(Class, class_id)
        if existing is None:
            return None

        async with self.transaction():
            for field, value in payload.model_dump(exclude_unset=True).items():
                if value is None and field in REQUIRED_FIELDS:
                    continue
                setattr(existing, field, value)

        return existing

    async def delete_class(self, class_id: str) -> None:
        """Remove a class if present. Students pointing at it are left untouched."""
        async with self.transaction():
            await self.db.execute(delete(Class).where(Class.id == class_id))

    async def get_classes_by_ids(self, ids: Iterable[str]) -> Dict[str, Class]:
        return await self.fetch_by_ids(Class, ids)

    async def list_classes(self, depth: int = 1) -> List[Dict[str, Any]]:
        """All classes, with ``teacher`` resolved when ``depth`` >= 1."""
        classes = await self.list_all(Class)
        return await self.resolve_classes(classes, depth)

    async def resolve_classes(self, classes: Sequence[Class], depth: int) -> List[Dict[str, Any]]:
        if depth < 0:
            raise ValueError("depth must not be negative")

        documents = [ClassOut.document(c) for c in classes]
        if depth == 0:
            return documents

        teachers = await self.fetch_by_ids(Teacher, (c.teacher_id for c in classes))
        for document, record in zip(documents, classes):
            document["teacher"] = TeacherOut.document(teachers.get(record.teacher_id))
        return documents
