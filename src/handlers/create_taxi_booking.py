"""POST /bookings/taxi: book a taxi trip."""

from typing import Any

from transport.clients import get_database
from transport.config import get_config
from transport.models import CreateTaxiBookingInput, TaxiBookingOut
from transport.responses import api_handler, parse_body, success_response
from transport.services.booking import create_taxi_booking


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    payload = CreateTaxiBookingInput.model_validate(parse_body(event))

    with get_database().session() as session:
        booking = create_taxi_booking(session, payload, tax_rate=get_config().tax_rate)
        result = TaxiBookingOut.model_validate(booking)

    return success_response(result, message="Taxi booked successfully", status=201)
