"""Human-readable booking references, e.g. ``VR-45123987-K3ZQ``."""

import random
import string
from time import time

from transport.errors import validation_error
from transport.models.enums import BookingType

PREFIXES: dict[BookingType, str] = {
    BookingType.VEHICLE: "VR",
    BookingType.TAXI: "TX",
}

_BASE36 = string.digits + string.ascii_uppercase


def generate_booking_number(booking_type: BookingType | str) -> str:
    """Build ``PREFIX-<last 8 digits of epoch ms>-<4 base36 chars>``.

    Not guaranteed unique; the bookings tables enforce uniqueness on insert.
    """
    try:
        prefix = PREFIXES[BookingType(booking_type)]
    except ValueError as e:
        raise validation_error(f"Unknown booking type: {booking_type}") from e

    timestamp = str(int(time() * 1000))[-8:]
    suffix = "".join(random.choices(_BASE36, k=4))
    return f"{prefix}-{timestamp}-{suffix}"
