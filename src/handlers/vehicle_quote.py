"""POST /vehicles/quote: rental price for a vehicle and date range."""

from typing import Any

from transport.clients import get_database
from transport.config import get_config
from transport.models import VehicleQuoteRequest
from transport.responses import api_handler, parse_body, success_response
from transport.services.booking import quote_vehicle_booking


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    request = VehicleQuoteRequest.model_validate(parse_body(event))

    with get_database().session() as session:
        quote = quote_vehicle_booking(session, request, tax_rate=get_config().tax_rate)

    return success_response(quote)
