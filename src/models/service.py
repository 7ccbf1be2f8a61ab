"""Service model - an entry in the service catalog."""

from typing import Optional
from pydantic import BaseModel, Field


class Service(BaseModel):
    """Catalog service offered to users."""
    id: Optional[int] = Field(None, description="Service ID (assigned by the database)")
    name: str = Field(..., min_length=1, description="Display name, unique in the catalog")
    description: str = Field(..., description="Short marketing description")
    created_at: Optional[str] = None


DEFAULT_SERVICES: tuple[Service, ...] = (
    Service(
        name="Web Hosting",
        description="Reliable web hosting services with 99.9% uptime guarantee.",
    ),
    Service(
        name="File Cloud",
        description="Secure cloud storage for your files with easy access from anywhere.",
    ),
    Service(
        name="Application Server",
        description="Dedicated application server for your custom applications.",
    ),
    Service(
        name="CI / CD",
        description="Continuous Integration and Continuous Deployment pipeline setup and management.",
    ),
)
