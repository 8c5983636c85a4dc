"""POST /bookings/vehicle: reserve a rental vehicle."""

from typing import Any

from transport.clients import get_database
from transport.config import get_config
from transport.models import CreateVehicleBookingInput, VehicleBookingOut
from transport.responses import api_handler, parse_body, success_response
from transport.services.booking import create_vehicle_booking


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    payload = CreateVehicleBookingInput.model_validate(parse_body(event))

    with get_database().session() as session:
        booking = create_vehicle_booking(session, payload, tax_rate=get_config().tax_rate)
        result = VehicleBookingOut.model_validate(booking)

    return success_response(result, message="Booking created successfully", status=201)
