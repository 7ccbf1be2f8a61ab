"""Error handling utilities."""

from typing import Optional


class ServiceGatewayError(Exception):
    """Base exception for the service gateway backend."""
    pass


class SupabaseError(ServiceGatewayError):
    """Supabase operation error."""
    pass


class UpstreamError(ServiceGatewayError):
    """Outbound HTTP call to an upstream service failed."""
    pass


class OperationError(ServiceGatewayError):
    """Expected failure of an operation, safe to show to the caller."""

    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(OperationError):
    """Request body could not be read as the operation's input."""
    status_code = 400
    default_message = "Invalid request body"


class MissingParameters(OperationError):
    status_code = 400
    default_message = "Missing required parameters"


class InvalidStatus(OperationError):
    status_code = 400
    default_message = "Invalid status. Must be approved, rejected, or pending."


class AuthenticationRequired(OperationError):
    status_code = 401
    default_message = "Authentication required"


class InvalidAuthentication(OperationError):
    """Credentials did not match a stored user (never says which one)."""
    status_code = 401
    default_message = "Invalid authentication"


class AdminRequired(OperationError):
    status_code = 403
    default_message = "Unauthorized. Admin or root access required."


class ServiceNotFound(OperationError):
    status_code = 404
    default_message = "Service not found"


class ServiceRequestNotFound(OperationError):
    status_code = 404
    default_message = "Service request not found"
