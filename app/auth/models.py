from pydantic import BaseModel

from app.users.models import UserPublic


class LoginRequest(BaseModel):
    """Credentials posted to /api/auth/login."""

    email: str
    password: str


class LoginResponse(BaseModel):
    user: UserPublic  # The authenticated user, without the password hash
