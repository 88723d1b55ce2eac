from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _object_id_to_str(v):
    """ObjectIds come back from Mongo as bson.ObjectId; the API deals in strings."""
    if v is None:
        return None
    return str(v)


ObjectIdStr = Annotated[Optional[str], BeforeValidator(_object_id_to_str)]


class UserRole(str, Enum):
    ADMIN = "admin"
    TEAM_LEADER = "team_leader"
    HR = "hr"


class User(BaseModel):
    """A user document from the users collection.

    Field aliases match the stored Mongo field names (camelCase, shared with
    the rest of the lead-management app). Python code uses the snake_case
    names; populate_by_name lets either be passed in.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(None, alias="_id")  # Generated on insert
    name: str
    email: str  # Demo users are reset by email, so treat it as the natural key
    password: str  # bcrypt hash, never the plaintext
    role: UserRole
    created_by: ObjectIdStr = Field(None, alias="createdBy")  # User who created this one
    team_leader: ObjectIdStr = Field(None, alias="teamLeader")  # Supervisor; HR users only


class UserPublic(BaseModel):
    """User as returned by the API: everything except the password hash."""

    id: str
    name: str
    email: str
    role: UserRole
    created_by: Optional[str] = None
    team_leader: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            created_by=user.created_by,
            team_leader=user.team_leader,
        )
