"""POST /admin/bookings/confirm: move a pending booking to CONFIRMED."""

from typing import Any

from transport.clients import get_database
from transport.models import BookingType, ConfirmBookingInput, TaxiBookingOut, VehicleBookingOut
from transport.responses import api_handler, parse_body, success_response
from transport.services.booking import confirm_booking


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    payload = ConfirmBookingInput.model_validate(parse_body(event))
    out_model = VehicleBookingOut if payload.type == BookingType.VEHICLE else TaxiBookingOut

    with get_database().session() as session:
        booking = confirm_booking(session, payload)
        result = out_model.model_validate(booking)

    return success_response(result, message="Booking confirmed")
