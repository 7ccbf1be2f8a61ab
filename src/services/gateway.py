"""HTTP-facing operations: each turns a JSON body into (status, response body)."""

import asyncio
import os
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from src.models.operation_inputs import (
    ListServiceRequestsInput,
    ListServicesInput,
    RequestServiceInput,
    UpdateServiceRequestStatusInput,
)
from src.services.ai_health import check_ai_health
from src.services.db_status import measure_db_latency
from src.services.service_catalog import ensure_default_services, list_services, request_service
from src.services.service_requests import list_service_requests, update_service_request_status
from src.utils.http import OperationResult, failure, parse_input, run_operation

_auto_seed_done = False


async def get_services(body: Any) -> OperationResult:
    payload = parse_input(ListServicesInput, body)
    services = await list_services(payload)
    return 200, {"success": True, "services": services}


async def submit_service_request(body: Any) -> OperationResult:
    payload = parse_input(RequestServiceInput, body)
    request_id = await request_service(payload)
    return 201, {
        "success": True,
        "message": "Service request submitted successfully",
        "requestId": request_id,
    }


async def get_service_requests(body: Any) -> OperationResult:
    payload = parse_input(ListServiceRequestsInput, body)
    rows = await list_service_requests(payload)
    return 200, {"success": True, "serviceRequests": rows}


async def set_service_request_status(body: Any) -> OperationResult:
    payload = parse_input(UpdateServiceRequestStatusInput, body)
    updated = await update_service_request_status(payload)
    return 200, {
        "success": True,
        "message": f"Service request {updated.get('status', payload.status)} successfully",
        "serviceRequest": updated,
    }


async def check_latency(body: Any) -> OperationResult:
    latency_ms = await measure_db_latency()
    return 200, {"success": True, "message": "Latency check successful", "dbLatency": latency_ms}


@dataclass(frozen=True)
class GatewayOperation:
    """An operation plus the generic message shown when it fails unexpectedly."""
    name: str
    handler: Callable[[Any], Awaitable[OperationResult]]
    failure_message: str

    def __call__(self, body: Any) -> OperationResult:
        return run_operation(self.name, self.failure_message, lambda: self.handler(body))


GET_SERVICES = GatewayOperation(
    "getServices", get_services, "An error occurred while fetching services"
)
REQUEST_SERVICE = GatewayOperation(
    "requestService", submit_service_request, "An error occurred while submitting your request"
)
GET_SERVICE_REQUESTS = GatewayOperation(
    "getServiceRequests", get_service_requests, "An error occurred while fetching service requests"
)
UPDATE_SERVICE_REQUEST_STATUS = GatewayOperation(
    "updateServiceRequestStatus",
    set_service_request_status,
    "An error occurred while updating service request status",
)
CHECK_LATENCY = GatewayOperation(
    "checkLatency", check_latency, "Failed to check database latency"
)

SERVICE_ACTIONS = {
    op.name: op
    for op in (GET_SERVICES, REQUEST_SERVICE, GET_SERVICE_REQUESTS, UPDATE_SERVICE_REQUEST_STATUS)
}
STATUS_ACTIONS = {CHECK_LATENCY.name: CHECK_LATENCY}


def dispatch_action(actions: dict, body: Any) -> OperationResult:
    """Route a legacy ``{"action": ...}`` body to its operation."""
    action = body.get("action") if isinstance(body, dict) else None
    operation = actions.get(action) if isinstance(action, str) else None
    if operation is None:
        return 400, failure("Invalid action")
    return operation(body)


def ai_health() -> OperationResult:
    async def _check() -> OperationResult:
        return 200, {"success": True, "data": await check_ai_health()}

    return run_operation("aiHealth", "Failed to connect to AI service", _check)


def auto_seed_enabled() -> bool:
    return os.environ.get("AUTO_SEED_SERVICES", "false").lower() == "true"


def maybe_auto_seed() -> None:
    """Seed the catalog once per process when AUTO_SEED_SERVICES is on."""
    global _auto_seed_done

    if _auto_seed_done or not auto_seed_enabled():
        return
    _auto_seed_done = True
    asyncio.run(ensure_default_services())
