"""
Depth-controlled reference resolution in the repository services.
"""
import pytest

from school_admin.models import Class, Student, Teacher
from school_admin.schemas import ClassCreate, StudentCreate
from school_admin.services import ClassService, StudentService

pytestmark = pytest.mark.anyio


@pytest.fixture
async def seeded(app):
    async with app.state.session_factory() as session:
        teacher = Teacher(name="T", email="t@x.com", password_hash="hash")
        session.add(teacher)
        await session.commit()

        classes = ClassService(session)
        linked = await classes.create_class(ClassCreate(standard="5", section="A", teacher_id=teacher.id))
        orphan = await classes.create_class(ClassCreate(standard="6", section="B", teacher_id="ghost"))

        students = StudentService(session)
        await students.create_student(StudentCreate(first_name="In", class_id=linked.id))
        await students.create_student(StudentCreate(first_name="Orphan", class_id=orphan.id))
        await students.create_student(StudentCreate(first_name="Lost", class_id="missing"))

    return {"teacher_id": teacher.id, "linked_id": linked.id, "orphan_id": orphan.id}


@pytest.fixture
async def session(app):
    async with app.state.session_factory() as s:
        yield s


async def test_class_depth_zero_keeps_raw_reference(seeded, session):
    documents = await ClassService(session).list_classes(depth=0)
    assert [d["teacherId"] for d in documents] == [seeded["teacher_id"], "ghost"]
    assert all("teacher" not in d for d in documents)


async def test_class_depth_one_resolves_teacher(seeded, session):
    documents = await ClassService(session).list_classes(depth=1)
    assert documents[0]["teacher"]["id"] == seeded["teacher_id"]
    assert documents[0]["teacher"]["email"] == "t@x.com"
    assert documents[1]["teacher"] is None


async def test_student_depth_zero(seeded, session):
    documents = await StudentService(session).list_students(depth=0)
    assert [d["classId"] for d in documents] == [seeded["linked_id"], seeded["orphan_id"], "missing"]
    assert all("class" not in d for d in documents)


async def test_student_depth_one_resolves_class_only(seeded, session):
    documents = await StudentService(session).list_students(depth=1)
    assert documents[0]["class"]["id"] == seeded["linked_id"]
    assert "teacher" not in documents[0]["class"]
    assert documents[2]["class"] is None


async def test_student_depth_two_resolves_class_teacher(seeded, session):
    documents = await StudentService(session).list_students(depth=2)
    by_name = {d["firstName"]: d for d in documents}

    assert by_name["In"]["class"]["teacher"]["id"] == seeded["teacher_id"]
    assert by_name["Orphan"]["class"]["id"] == seeded["orphan_id"]
    assert by_name["Orphan"]["class"]["teacher"] is None
    assert by_name["Lost"]["class"] is None


async def test_resolution_does_not_modify_stored_records(app, seeded, session):
    await StudentService(session).list_students(depth=2)
    await ClassService(session).list_classes(depth=1)

    async with app.state.session_factory() as fresh:
        orphan = await fresh.get(Class, seeded["orphan_id"])
        assert orphan.teacher_id == "ghost"
        students = (await StudentService(fresh).list_students(depth=0))
        assert students[2]["classId"] == "missing"
        assert await fresh.get(Student, students[0]["id"]) is not None


async def test_negative_depth_is_rejected(session):
    with pytest.raises(ValueError):
        await StudentService(session).list_students(depth=-1)
    with pytest.raises(ValueError):
        await ClassService(session).list_classes(depth=-1)
