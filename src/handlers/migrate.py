"""Migration Lambda: applies Alembic migrations up to head."""

import logging
from typing import Any

from transport.services.migration import run_migrations

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    result = run_migrations()
    logger.info("Migrations applied")
    return {"statusCode": 200, "body": result["output"]}
