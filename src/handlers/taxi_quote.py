"""POST /taxi/quote: fare for every taxi category that seats the party."""

from typing import Any

from transport.clients import get_database
from transport.config import get_config
from transport.models import Coordinates, TaxiQuoteRequest
from transport.responses import api_handler, parse_body, success_response
from transport.services.booking import quote_taxi_categories
from transport.services.routing import estimate_route


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    request = TaxiQuoteRequest.model_validate(parse_body(event))

    distance = request.distance
    if distance is None:
        route = estimate_route(
            Coordinates(latitude=request.pickup_lat, longitude=request.pickup_lng),
            Coordinates(latitude=request.dropoff_lat, longitude=request.dropoff_lng),
        )
        distance = route.distance

    with get_database().session() as session:
        quotes = quote_taxi_categories(session, distance, request.passengers, tax_rate=get_config().tax_rate)

    return success_response(quotes)
