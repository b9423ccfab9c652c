from typing import Any, Dict, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.core.database import get_db
from school_admin.core.errors import MissingTokenError
from school_admin.core.security import CredentialStore, TokenService
from school_admin.services import ClassService, StudentService, TeacherService


# Shared components built once by create_app
def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credential_store


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


# Service providers
def get_teacher_service(
    db: AsyncSession = Depends(get_db),
    credentials: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service)
) -> TeacherService:
    return TeacherService(db, credentials, tokens)


def get_class_service(db: AsyncSession = Depends(get_db)) -> ClassService:
    return ClassService(db)


def get_student_service(db: AsyncSession = Depends(get_db)) -> StudentService:
    return StudentService(db)


# Identity attached by AuthMiddleware
def get_current_identity(request: Request) -> Dict[str, Any]:
    identity: Optional[Dict[str, Any]] = getattr(request.state, "user", None)
    if not identity:
        raise MissingTokenError()
    return identity


def get_current_teacher_id(identity: Dict[str, Any] = Depends(get_current_identity)) -> str:
    return str(identity["id"])
