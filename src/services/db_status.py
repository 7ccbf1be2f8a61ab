"""Database latency probe."""

from time import perf_counter

from src.services.supabase_client import ping_database


async def measure_db_latency() -> int:
    """Round-trip time of a trivial query, in whole milliseconds."""
    started = perf_counter()
    await ping_database()
    return round((perf_counter() - started) * 1000)
