"""User model - accounts owned by the auth system, read here for authentication only."""

from pydantic import BaseModel, Field

PRIVILEGED_ROLES = frozenset({"admin", "root"})


class User(BaseModel):
    """Authenticated caller."""
    id: int = Field(..., description="User ID")
    role: str = Field(default="user", description="Role: user, admin, root")

    @property
    def is_admin(self) -> bool:
        return self.role in PRIVILEGED_ROLES
