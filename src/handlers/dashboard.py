"""GET /admin/dashboard: booking counts and revenue."""

from typing import Any

from transport.clients import get_database
from transport.config import get_config
from transport.responses import api_handler, success_response
from transport.services.dashboard import compute_dashboard_stats


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    with get_database().session() as session:
        stats = compute_dashboard_stats(session, tz=get_config().timezone)

    return success_response(stats)
