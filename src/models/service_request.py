"""Service request model - a user's request for a catalog service."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ServiceRequestStatus(str, Enum):
    """Review states of a service request."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ServiceRequest(BaseModel):
    """Service request row."""
    id: Optional[int] = Field(None, description="Request ID (assigned by the database)")
    user_id: int = Field(..., description="Requesting user ID (FK users.id)")
    service_id: int = Field(..., description="Requested service ID (FK services.id)")
    details: str = Field(..., min_length=1, description="Free-form request details")
    status: ServiceRequestStatus = Field(default=ServiceRequestStatus.PENDING)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_insert_row(self) -> dict:
        """Columns written on creation; id and timestamps come from the database."""
        return {
            "user_id": self.user_id,
            "service_id": self.service_id,
            "details": self.details,
            "status": self.status.value,
        }
