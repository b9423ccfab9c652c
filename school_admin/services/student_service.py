from typing import Any, Dict, List, Optional

from sqlalchemy import delete

from school_admin.core.logging import logger
from school_admin.models import Student
from school_admin.schemas import StudentCreate, StudentOut, StudentUpdate
from .base_service import BaseService
from .class_service import ClassService


class StudentService(BaseService):
    async def create_student(self, payload: StudentCreate) -> Student:
        """Store a student as given; the class reference is not checked."""
        student = Student(**payload.model_dump())
        async with self.transaction():
            self.db.add(student)

        logger.info(f"Student created: {student.id}")
        return student

    async def update_student(self, student_id: str, payload: StudentUpdate) -> Optional[Student]:
        """Merge the given fields into a student. Returns None for an unknown id."""
        existing = await self.db.get(Student, student_id)
        if existing is None:
            return None

        async with self.transaction():
            for field, value in payload.model_dump(exclude_unset=True).items():
                setattr(existing, field, value)

        return existing

    async def delete_student(self, student_id: str) -> None:
        async with self.transaction():
            await self.db.execute(delete(Student).where(Student.id == student_id))

    async def list_students(self, depth: int = 2) -> List[Dict[str, Any]]:
        """All students with references resolved down to ``depth`` levels.

        depth 0 leaves ``classId`` as is, depth 1 adds the ``class`` record,
        depth 2 also resolves that class's ``teacher``. A reference that
        matches nothing resolves to None; the student is still listed.
        """
        if depth < 0:
            raise ValueError("depth must not be negative")

        students = await self.list_all(Student)
        documents = [StudentOut.document(s) for s in students]
        if depth == 0:
            return documents

        class_service = ClassService(self.db)
        classes = await class_service.get_classes_by_ids(s.class_id for s in students)
        ordered = list(classes.values())
        resolved = dict(zip(
            (c.id for c in ordered),
            await class_service.resolve_classes(ordered, depth - 1)
        ))

        for document, record in zip(documents, students):
            document["class"] = resolved.get(record.class_id)
        return documents
