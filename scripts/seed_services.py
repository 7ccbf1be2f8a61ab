"""Seed the service catalog with the default services.

Run once per deployment, after migrations:

    python scripts/seed_services.py

Exits 0 when the catalog was seeded or already populated, 1 on a storage error.
"""
import sys
import asyncio
import argparse
import pathlib

# Ensure the project root is on sys.path so `src` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.services.service_catalog import seed_default_services
from src.utils.error_tracking import capture_exception, init_error_tracking
from src.utils.logging import get_structured_logger
from src.utils.logging_config import LoggingConfig

logger = get_structured_logger("scripts.seed_services")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.parse_args(argv)

    LoggingConfig.setup_logging()
    init_error_tracking()

    try:
        inserted = asyncio.run(seed_default_services())
    except Exception as e:
        logger.error(f"Service catalog seed failed: {e}", exc_info=True)
        capture_exception(e)
        return 1

    if inserted:
        print(f"Seeded {inserted} default services")
    else:
        print("Service catalog already populated, nothing to do")
    return 0


if __name__ == '__main__':
    sys.exit(main())
