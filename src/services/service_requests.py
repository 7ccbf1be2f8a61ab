"""Admin review of service requests."""

from datetime import datetime, timezone
from typing import Optional

from src.models.operation_inputs import ListServiceRequestsInput, UpdateServiceRequestStatusInput, is_blank
from src.models.service_request import ServiceRequestStatus
from src.services.auth_gate import parse_id, require_admin, require_user
from src.services.supabase_client import (
    get_service_request_by_id,
    get_service_requests,
    update_service_request,
)
from src.utils.errors import InvalidStatus, MissingParameters, ServiceRequestNotFound
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


def parse_status(value: Optional[str]) -> ServiceRequestStatus:
    try:
        return ServiceRequestStatus(value)
    except ValueError:
        raise InvalidStatus()


def flatten_service_request(row: dict) -> dict:
    """Lift the embedded user and service columns to the top level of a row."""
    flat = {k: v for k, v in row.items() if k not in ("users", "services")}
    user = row.get("users") or {}
    service = row.get("services") or {}
    flat["username"] = user.get("username")
    flat["email"] = user.get("email")
    flat["service_name"] = service.get("name")
    return flat


async def list_service_requests(payload: ListServiceRequestsInput) -> list[dict]:
    """Return service requests newest first, optionally filtered by status."""
    user = require_admin(await require_user(payload.user_id, payload.token))

    status = None
    if not is_blank(payload.status):
        status = parse_status(payload.status).value

    rows = await get_service_requests(status)
    logger.info("Listed service requests", user_id=user.id, status=status, count=len(rows))
    return [flatten_service_request(row) for row in rows]


async def update_service_request_status(payload: UpdateServiceRequestStatusInput) -> dict:
    """Move a service request to a new review status and return the updated row."""
    if payload.missing_parameters():
        raise MissingParameters()

    status = parse_status(payload.status)
    user = require_admin(await require_user(payload.user_id, payload.token))

    request_id = parse_id(payload.request_id)
    if request_id is None or await get_service_request_by_id(request_id) is None:
        raise ServiceRequestNotFound()

    updated = await update_service_request(request_id, {
        "status": status.value,
        "updated_at": datetime.now(timezone.utc).isoformat(),
    })

    logger.info(
        "Service request status updated",
        request_id=request_id,
        status=status.value,
        reviewer_id=user.id,
    )
    return updated
