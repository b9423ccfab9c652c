"""Fail-together validation for the public registration and login inputs.

Each validator runs its full list of checks against the raw request body and
returns a ``ValidationResult`` holding either the parsed value or every
violation found. Nothing short-circuits: an empty body reports all messages.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar

from email_validator import EmailNotValidError, validate_email

from school_admin.core.errors import ValidationFailed
from school_admin.schemas.auth import LoginCredentials, TeacherRegistration

T = TypeVar("T")

MIN_PASSWORD_LENGTH = 8

# (field, message, predicate) evaluated in order
Check = Tuple[str, str, Callable[[str], bool]]


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    value: Optional[T] = None
    errors: List[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> T:
        """Return the validated value or raise ``ValidationFailed``."""
        if not self.ok:
            raise ValidationFailed([error.to_dict() for error in self.errors])
        return self.value


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    # objects, lists and booleans never count as a usable string
    return ""


def is_present(value: str) -> bool:
    return value.strip() != ""


def is_email(value: str) -> bool:
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def min_length(size: int) -> Callable[[str], bool]:
    # surrounding whitespace does not count towards the length
    def check(value: str) -> bool:
        return len(value.strip()) >= size
    return check


REGISTRATION_CHECKS: Sequence[Check] = (
    ("name", "Name is required", is_present),
    ("email", "Email is required", is_present),
    ("email", "Email is invalid", is_email),
    ("password", "Password is required", is_present),
    ("password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
     min_length(MIN_PASSWORD_LENGTH)),
)

LOGIN_CHECKS: Sequence[Check] = (
    ("email", "Email is required", is_present),
    ("email", "Email is invalid", is_email),
    ("password", "Password is required", is_present),
)


def run_checks(data: Mapping[str, Any], checks: Sequence[Check]) -> List[FieldViolation]:
    violations = []
    for field_name, message, predicate in checks:
        if not predicate(_as_text(data.get(field_name))):
            violations.append(FieldViolation(field_name, message))
    return violations


def _ensure_mapping(data: Any) -> Mapping[str, Any]:
    return data if isinstance(data, Mapping) else {}


def validate_registration(data: Any) -> ValidationResult[TeacherRegistration]:
    data = _ensure_mapping(data)
    errors = run_checks(data, REGISTRATION_CHECKS)
    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(value=TeacherRegistration(
        name=_as_text(data.get("name")).strip(),
        email=_as_text(data.get("email")).strip(),
        password=_as_text(data.get("password")),
        address=_as_text(data.get("address")).strip() or None,
    ))


def validate_login(data: Any) -> ValidationResult[LoginCredentials]:
    data = _ensure_mapping(data)
    errors = run_checks(data, LOGIN_CHECKS)
    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(value=LoginCredentials(
        email=_as_text(data.get("email")).strip(),
        password=_as_text(data.get("password")),
    ))
