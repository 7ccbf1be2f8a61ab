"""Supabase client wrapper with async context manager support."""

import os
from typing import Optional
from supabase import create_client, Client
from supabase.client import ClientOptions
from src.utils.errors import SupabaseError
import logging

logger = logging.getLogger(__name__)

# Global client instance (singleton pattern)
_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """Get or create Supabase client singleton."""
    global _client

    if _client is None:
        url = os.environ.get("SUPABASE_URL")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

        if not url or not key:
            raise SupabaseError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        # Serverless functions must not keep auth sessions between invocations
        options = ClientOptions(
            auto_refresh_token=False,
            persist_session=False,
        )

        _client = create_client(url, key, options)
        logger.info("Supabase client initialized", extra={"url": url})

    return _client


class SupabaseClient:
    """Async context manager for Supabase client."""

    def __init__(self):
        self.client: Optional[Client] = None

    async def __aenter__(self) -> Client:
        self.client = get_supabase_client()
        return self.client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            logger.error(
                "Supabase operation error",
                extra={"error": str(exc_val), "type": exc_type.__name__}
            )
        return False


# Users table (read-only, owned by the auth system)
async def find_user_by_credentials(user_id: int, token: str) -> Optional[dict]:
    """Get the user whose id and token both match exactly."""
    async with SupabaseClient() as client:
        try:
            result = (
                client.table("users")
                .select("id, role")
                .eq("id", user_id)
                .eq("token", token)
                .limit(1)
                .execute()
            )
            return result.data[0] if result.data and len(result.data) > 0 else None
        except Exception as e:
            raise SupabaseError(f"Failed to look up user: {e}")


# Services table operations
async def count_services() -> int:
    """Count rows in the service catalog."""
    async with SupabaseClient() as client:
        try:
            result = client.table("services").select("id", count="exact").execute()
            if result.count is not None:
                return result.count
            return len(result.data) if result.data else 0
        except Exception as e:
            raise SupabaseError(f"Failed to count services: {e}")


async def insert_services(services: list[dict]) -> list[dict]:
    """Insert catalog entries in one statement, skipping names that already exist."""
    async with SupabaseClient() as client:
        try:
            result = (
                client.table("services")
                .upsert(services, on_conflict="name", ignore_duplicates=True)
                .execute()
            )
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to insert services: {e}")


async def get_services_ordered_by_name() -> list[dict]:
    """Get all services as id, name, description ordered by name ascending."""
    async with SupabaseClient() as client:
        try:
            result = client.table("services").select("id, name, description").order("name").execute()
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to get services: {e}")


async def get_service_by_id(service_id: int) -> Optional[dict]:
    """Get service by ID."""
    async with SupabaseClient() as client:
        try:
            result = client.table("services").select("id").eq("id", service_id).limit(1).execute()
            return result.data[0] if result.data and len(result.data) > 0 else None
        except Exception as e:
            raise SupabaseError(f"Failed to get service: {e}")


async def ping_database() -> None:
    """Run the cheapest possible query to prove the database answers."""
    async with SupabaseClient() as client:
        try:
            client.table("services").select("id").limit(1).execute()
        except Exception as e:
            raise SupabaseError(f"Database ping failed: {e}")


# Service requests table operations
async def create_service_request(request_data: dict) -> dict:
    """Create a new service request."""
    async with SupabaseClient() as client:
        try:
            result = client.table("service_requests").insert(request_data).execute()
            if result.data and len(result.data) > 0:
                return result.data[0]
            raise SupabaseError("Failed to create service request: no data returned")
        except SupabaseError:
            raise
        except Exception as e:
            raise SupabaseError(f"Failed to create service request: {e}")


async def get_service_requests(status: Optional[str] = None) -> list[dict]:
    """Get service requests with their user and service, newest first."""
    async with SupabaseClient() as client:
        try:
            query = client.table("service_requests").select(
                "*, users(username, email), services(name)"
            )
            if status:
                query = query.eq("status", status)
            result = query.order("created_at", desc=True).execute()
            return result.data if result.data else []
        except Exception as e:
            raise SupabaseError(f"Failed to get service requests: {e}")


async def get_service_request_by_id(request_id: int) -> Optional[dict]:
    """Get service request by ID."""
    async with SupabaseClient() as client:
        try:
            result = client.table("service_requests").select("*").eq("id", request_id).limit(1).execute()
            return result.data[0] if result.data and len(result.data) > 0 else None
        except Exception as e:
            raise SupabaseError(f"Failed to get service request: {e}")


async def update_service_request(request_id: int, updates: dict) -> dict:
    """Update a service request."""
    async with SupabaseClient() as client:
        try:
            result = client.table("service_requests").update(updates).eq("id", request_id).execute()
            if result.data and len(result.data) > 0:
                return result.data[0]
            raise SupabaseError(f"Failed to update service request: {request_id}")
        except SupabaseError:
            raise
        except Exception as e:
            raise SupabaseError(f"Failed to update service request: {e}")
