"""GET /vehicles: available rental vehicles for a date range, paginated."""

from typing import Any

from transport.clients import get_database
from transport.config import get_config
from transport.errors import validation_error
from transport.models import VehicleAvailabilityQuery, VehicleOut
from transport.responses import api_handler, paginated_response
from transport.services.booking import find_available_vehicles
from transport.utils.formatting import parse_date
from transport.utils.pagination import pagination_from_query


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    params = event.get("queryStringParameters") or {}
    if not params.get("pickupDate") or not params.get("dropoffDate"):
        raise validation_error("pickupDate and dropoffDate are required")

    config = get_config()
    query = VehicleAvailabilityQuery(
        pickup_date=parse_date(params["pickupDate"]),
        dropoff_date=parse_date(params["dropoffDate"]),
        location_id=params.get("locationId"),
    )
    window = pagination_from_query(params, config.default_page_limit, config.max_page_limit)

    with get_database().session() as session:
        vehicles, total = find_available_vehicles(session, query, window)
        items = [VehicleOut.model_validate(vehicle) for vehicle in vehicles]

    return paginated_response(items, window, total)
