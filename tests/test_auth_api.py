"""
Registration and login endpoints.
"""
import pytest
from sqlalchemy import func, select

from school_admin.core.errors import DuplicateResourceError
from school_admin.models import Teacher
from school_admin.schemas import TeacherRegistration
from school_admin.services import TeacherService

pytestmark = pytest.mark.anyio


async def count_teachers(app) -> int:
    async with app.state.session_factory() as session:
        return (await session.execute(select(func.count()).select_from(Teacher))).scalar_one()


async def stored_teacher(app, email: str) -> Teacher:
    async with app.state.session_factory() as session:
        result = await session.execute(select(Teacher).where(Teacher.email == email))
        return result.scalar_one()


async def test_register_returns_user_without_credentials(register_teacher):
    r = await register_teacher()
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Registration is done successfully"

    user = body["user"]
    assert user["name"] == "A"
    assert user["email"] == "a@x.com"
    assert user["address"] == "1 Main Street"
    assert user["status"] == "ACTIVE"
    assert user["id"]
    assert "password" not in user
    assert "passwordHash" not in user
    assert "password1" not in r.text


async def test_register_stores_hash_not_plaintext(app, register_teacher):
    await register_teacher()
    teacher = await stored_teacher(app, "a@x.com")
    assert teacher.password_hash != "password1"
    assert await app.state.credential_store.verify("password1", teacher.password_hash)


async def test_duplicate_email_is_rejected_without_new_record(app, register_teacher):
    await register_teacher()
    r = await register_teacher(name="B", password="different-password")
    assert r.status_code == 400
    assert r.json() == {"message": "Email already exists"}
    assert await count_teachers(app) == 1


async def test_register_validation_errors_are_aggregated(app, client):
    r = await client.post("/register", json={"email": "bad", "password": "short"})
    assert r.status_code == 400
    assert r.json() == {
        "errors": [
            {"field": "name", "message": "Name is required"},
            {"field": "email", "message": "Email is invalid"},
            {"field": "password", "message": "Password must be at least 8 characters long"},
        ]
    }
    assert await count_teachers(app) == 0


async def test_register_without_body(client):
    r = await client.post("/register")
    assert r.status_code == 400
    assert len(r.json()["errors"]) == 5


async def test_register_with_malformed_json(client):
    r = await client.post(
        "/register", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert r.status_code == 400
    assert "errors" in r.json()


async def test_login_returns_token_for_teacher(app, register_teacher, login):
    registered = (await register_teacher()).json()["user"]
    r = await login()
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Login successful"
    assert body["user"]["id"] == registered["id"]
    assert "password" not in body["user"]
    assert app.state.token_service.verify(body["token"]) == {"id": registered["id"]}


async def test_login_with_wrong_password(register_teacher, login):
    await register_teacher()
    r = await login(password="password2")
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid email or password"}


async def test_login_with_unknown_email_looks_like_wrong_password(register_teacher, login):
    await register_teacher()
    r = await login(email="nobody@x.com")
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid email or password"}


async def test_login_validation_errors(client):
    r = await client.post("/login", json={})
    assert r.status_code == 400
    assert [e["message"] for e in r.json()["errors"]] == [
        "Email is required",
        "Email is invalid",
        "Password is required",
    ]


async def test_concurrent_registration_race_is_caught_by_store(app, monkeypatch):
    """Both registrations pass the email lookup; the unique index rejects the second."""
    async def nobody(self, email):
        return None

    monkeypatch.setattr(TeacherService, "get_teacher_by_email", nobody)
    registration = TeacherRegistration(name="A", email="race@x.com", password="password1")

    async with app.state.session_factory() as session:
        service = TeacherService(session, app.state.credential_store, app.state.token_service)
        await service.register_teacher(registration)
    assert await count_teachers(app) == 1

    async with app.state.session_factory() as session:
        service = TeacherService(session, app.state.credential_store, app.state.token_service)
        with pytest.raises(DuplicateResourceError):
            await service.register_teacher(registration)

    assert await count_teachers(app) == 1


async def test_padded_password_does_not_satisfy_minimum_length(app, register_teacher):
    r = await register_teacher(password="       x")
    assert r.status_code == 400
    assert r.json() == {
        "errors": [{"field": "password", "message": "Password must be at least 8 characters long"}]
    }
    assert await count_teachers(app) == 0


async def test_login_requires_exact_registered_password(app, register_teacher, login):
    assert (await register_teacher(password="  password1  ")).status_code == 200

    teacher = await stored_teacher(app, "a@x.com")
    assert await app.state.credential_store.verify("  password1  ", teacher.password_hash)
    assert not await app.state.credential_store.verify("password1", teacher.password_hash)

    assert (await login(password="password1")).status_code == 400
    assert (await login(password="  password1  ")).status_code == 200
