from typing import Optional

import bcrypt
from bson import ObjectId

from app.database import get_database
from app.users.models import User, UserRole


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode(), hashed.encode())
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


async def delete_users_by_email(emails: list[str]) -> int:
    """Delete every user whose email is in `emails`. Returns how many were removed."""
    db = get_database()
    result = await db.users.delete_many({"email": {"$in": emails}})
    return result.deleted_count


async def create_user(
    name: str,
    email: str,
    password: str,
    role: UserRole,
    created_by: Optional[str] = None,
    team_leader: Optional[str] = None,
) -> User:
    """Insert one user and return it with its generated id.

    The plaintext password is hashed here, so callers always pass what the
    user would type at login. created_by and team_leader are user ids as
    strings and are stored as ObjectId references.
    """
    db = get_database()
    doc = {
        "name": name,
        "email": email,
        "password": hash_password(password),
        "role": UserRole(role).value,
        "createdBy": ObjectId(created_by) if created_by else None,
        "teamLeader": ObjectId(team_leader) if team_leader else None,
    }
    result = await db.users.insert_one(doc)
    doc["_id"] = result.inserted_id
    return User(**doc)


async def get_user_by_email(email: str) -> Optional[User]:
    db = get_database()
    doc = await db.users.find_one({"email": email})
    if not doc:
        return None
    return User(**doc)


async def authenticate_user(email: str, password: str) -> Optional[User]:
    """Return the user if the email exists and the password matches, else None.

    Unknown email and wrong password both return None so the router can give
    the same 401 for either.
    """
    user = await get_user_by_email(email)
    if not user or not verify_password(password, user.password):
        return None
    return user
