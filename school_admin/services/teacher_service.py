from typing import Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.core.errors import DuplicateResourceError, InvalidCredentialsError
from school_admin.core.logging import logger
from school_admin.core.security import CredentialStore, TokenService
from school_admin.models import Teacher
from school_admin.schemas import LoginCredentials, TeacherRegistration
from .base_service import BaseService


class TeacherService(BaseService):
    def __init__(self, db: AsyncSession, credentials: CredentialStore, tokens: TokenService):
        super().__init__(db)
        self.credentials = credentials
        self.tokens = tokens

    async def get_teacher_by_email(self, email: str) -> Optional[Teacher]:
        result = await self.db.execute(select(Teacher).where(Teacher.email == email))
        return result.scalar_one_or_none()

    async def register_teacher(self, registration: TeacherRegistration) -> Teacher:
        """Create a teacher account, rejecting an email that is already taken.

        The lookup and the insert are not atomic; two concurrent registrations
        can both pass the lookup. The unique index on ``email`` catches the
        second insert, which is reported as the same duplicate error.
        """
        if await self.get_teacher_by_email(registration.email):
            raise DuplicateResourceError("Email already exists")

        teacher = Teacher(
            name=registration.name,
            email=registration.email,
            password_hash=await self.credentials.hash(registration.password),
            address=registration.address,
        )

        try:
            async with self.transaction():
                self.db.add(teacher)
        except IntegrityError:
            logger.warning("Duplicate email rejected by store constraint")
            raise DuplicateResourceError("Email already exists")

        logger.info(f"New teacher registered: {teacher.id}")
        return teacher

    async def authenticate(self, credentials: LoginCredentials) -> Tuple[Teacher, str]:
        """Check an email/password pair and issue a token for the teacher."""
        teacher = await self.get_teacher_by_email(credentials.email)
        if teacher is None:
            await self.credentials.dummy_verify()
            raise InvalidCredentialsError()

        if not await self.credentials.verify(credentials.password, teacher.password_hash):
            raise InvalidCredentialsError()

        token = self.tokens.issue({"id": teacher.id})
        logger.info(f"Teacher logged in: {teacher.id}")
        return teacher, token
