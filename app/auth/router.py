from fastapi import APIRouter, HTTPException

from app.auth.models import LoginRequest, LoginResponse
from app.users.models import UserPublic
from app.users.service import authenticate_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest):
    """Check an email/password pair against the users collection.

    Returns the same 401 for an unknown email and a wrong password so the
    endpoint can't be used to probe which emails exist.
    """
    user = await authenticate_user(request.email, request.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return LoginResponse(user=UserPublic.from_user(user))
