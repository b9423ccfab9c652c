from typing import Optional

from pydantic import BaseModel


# Registration input after the validation checks have passed.
# The password is kept exactly as sent; it is the credential.
class TeacherRegistration(BaseModel):
    name: str
    email: str
    password: str
    address: Optional[str] = None


# Login input after the validation checks have passed
class LoginCredentials(BaseModel):
    email: str
    password: str
