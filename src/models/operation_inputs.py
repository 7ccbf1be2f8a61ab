"""Input schemas for the gateway operations (JSON bodies use camelCase)."""

from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt

# Ids arrive either as JSON numbers or as numeric strings from form-driven clients
IdValue = Union[StrictInt, str]


def is_blank(value: Any) -> bool:
    """True for values the operations treat as not supplied."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, int):
        return value == 0
    return False


class OperationInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: Optional[IdValue] = Field(None, alias="userId")
    token: Optional[str] = None


class ListServicesInput(OperationInput):
    """Body of a list-services call."""


class RequestServiceInput(OperationInput):
    """Body of a submit-request call."""
    service_id: Optional[IdValue] = Field(None, alias="serviceId")
    details: Optional[str] = None

    def missing_parameters(self) -> bool:
        return any(is_blank(v) for v in (self.user_id, self.token, self.service_id, self.details))


class ListServiceRequestsInput(OperationInput):
    """Body of the admin listing call; status is an optional filter."""
    status: Optional[str] = None


class UpdateServiceRequestStatusInput(OperationInput):
    """Body of the admin review call."""
    request_id: Optional[IdValue] = Field(None, alias="requestId")
    status: Optional[str] = None

    def missing_parameters(self) -> bool:
        return any(is_blank(v) for v in (self.user_id, self.token, self.request_id, self.status))
