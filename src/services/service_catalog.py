"""Service catalog operations: seed the defaults, list services, submit requests."""

from src.models.operation_inputs import ListServicesInput, RequestServiceInput
from src.models.service import DEFAULT_SERVICES
from src.models.service_request import ServiceRequest
from src.services.auth_gate import parse_id, require_user
from src.services.supabase_client import (
    count_services,
    create_service_request,
    get_service_by_id,
    get_services_ordered_by_name,
    insert_services,
)
from src.utils.error_tracking import capture_exception
from src.utils.errors import MissingParameters, ServiceNotFound
from src.utils.logging import get_structured_logger, log_timing

logger = get_structured_logger(__name__)


async def seed_default_services() -> int:
    """
    Seed the catalog with the default services when it is empty.

    Runs one bulk insert, and only when the catalog has no rows. Returns the
    number of services inserted. Storage errors propagate.
    """
    existing = await count_services()
    if existing > 0:
        logger.debug("Service catalog already populated", service_count=existing)
        return 0

    rows = [service.model_dump(include={"name", "description"}) for service in DEFAULT_SERVICES]
    inserted = await insert_services(rows)
    logger.info("Default services initialized", inserted=len(inserted))
    return len(inserted)


async def ensure_default_services() -> int:
    """
    Like seed_default_services, but storage errors are logged and reported
    instead of raised; a failed seed leaves an empty or partial catalog.
    """
    try:
        return await seed_default_services()
    except Exception as e:
        logger.error(f"Error initializing services: {e}", exc_info=True)
        capture_exception(e)
        return 0


async def list_services(payload: ListServicesInput) -> list[dict]:
    """Return every service (id, name, description) ordered by name."""
    await require_user(payload.user_id, payload.token)

    with log_timing("list_services", logger=logger):
        services = await get_services_ordered_by_name()

    return [
        {"id": s.get("id"), "name": s.get("name"), "description": s.get("description")}
        for s in services
    ]


async def request_service(payload: RequestServiceInput) -> int:
    """
    Record a service request and return its id.

    Each step gates the next: presence of all fields, authentication,
    existence of the service, then the insert.
    """
    if payload.missing_parameters():
        raise MissingParameters()

    user = await require_user(payload.user_id, payload.token)

    service_id = parse_id(payload.service_id)
    if service_id is None or await get_service_by_id(service_id) is None:
        logger.info("Service request for unknown service", user_id=user.id, service_id=payload.service_id)
        raise ServiceNotFound()

    request = ServiceRequest(user_id=user.id, service_id=service_id, details=payload.details)
    created = await create_service_request(request.to_insert_row())

    logger.info(
        "Service request created",
        request_id=created.get("id"),
        user_id=user.id,
        service_id=service_id,
    )
    return created["id"]
