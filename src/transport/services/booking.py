"""
Booking workflows: customer resolution, availability, quotes and creation.

Functions take an open ``Session`` and flush but never commit; the caller
owns the transaction (see ``Database.session``).
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import and_, exists, func, select
from sqlalchemy.orm import Session

from transport.db.schemas import Customer, TaxiBooking, Vehicle, VehicleBooking, VehicleCategory
from transport.errors import conflict_error, not_found_error, validation_error
from transport.models.booking import (
    ConfirmBookingInput,
    CreateTaxiBookingInput,
    CreateVehicleBookingInput,
    CustomerInput,
    VehicleAvailabilityQuery,
    VehicleQuoteRequest,
)
from transport.models.enums import ACTIVE_BOOKING_STATUSES, BookingStatus, BookingType, VehicleStatus
from transport.models.pricing import TaxiPriceCalculation, VehicleBookingQuote
from transport.models.routing import Coordinates
from transport.services.booking_number import generate_booking_number
from transport.services.pricing import (
    DEFAULT_TAX_RATE,
    calculate_number_of_days,
    calculate_vehicle_booking_price,
    is_date_range_valid,
    quote_taxi_category,
)
from transport.services.routing import estimate_route
from transport.utils.formatting import is_date_in_past
from transport.utils.pagination import PageWindow

logger = logging.getLogger(__name__)

_ACTIVE_STATUS_VALUES = [status.value for status in ACTIVE_BOOKING_STATUSES]


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


# -------- customers --------
def resolve_customer(
    session: Session,
    customer_id: str | None,
    customer: CustomerInput | None,
) -> Customer:
    """Look a customer up by id, or reuse/create one from inline details.

    Inline details are matched to an existing customer by email.
    """
    if customer_id is not None:
        existing = session.get(Customer, customer_id)
        if existing is None:
            raise not_found_error("Customer")
        return existing

    if customer is None:
        raise validation_error("Either customerId or customer is required")

    existing = session.scalars(select(Customer).where(Customer.email == customer.email)).first()
    if existing is not None:
        return existing

    created = Customer(**customer.model_dump())
    session.add(created)
    session.flush()
    logger.info("Created customer %s", created.id)
    return created


# -------- vehicles --------
def get_vehicle(session: Session, vehicle_id: str, lock: bool = False) -> Vehicle:
    """Fetch a vehicle; ``lock`` takes a row lock (SELECT ... FOR UPDATE) until the transaction ends."""
    vehicle = session.get(Vehicle, vehicle_id, with_for_update=lock or None)
    if vehicle is None:
        raise not_found_error("Vehicle")
    return vehicle


def _overlapping_booking(vehicle_id, start: datetime, end: datetime):
    """Active bookings of the vehicle overlapping [start, end)."""
    return and_(
        VehicleBooking.vehicle_id == vehicle_id,
        VehicleBooking.status.in_(_ACTIVE_STATUS_VALUES),
        VehicleBooking.pickup_date < end,
        start < VehicleBooking.dropoff_date,
    )


def has_overlapping_booking(session: Session, vehicle_id: str, start: datetime, end: datetime) -> bool:
    return bool(session.scalar(select(exists().where(_overlapping_booking(vehicle_id, start, end)))))


def find_available_vehicles(
    session: Session,
    query: VehicleAvailabilityQuery,
    window: PageWindow,
) -> tuple[list[Vehicle], int]:
    """Vehicles that are AVAILABLE and free for the whole requested range."""
    conditions = [
        Vehicle.status == VehicleStatus.AVAILABLE.value,
        ~exists().where(_overlapping_booking(Vehicle.id, query.pickup_date, query.dropoff_date)),
    ]
    if query.location_id:
        conditions.append(Vehicle.location_id == query.location_id)

    total = session.scalar(select(func.count()).select_from(Vehicle).where(*conditions)) or 0
    vehicles = session.scalars(
        select(Vehicle)
        .where(*conditions)
        .order_by(Vehicle.price_per_day, Vehicle.name)
        .offset(window.skip)
        .limit(window.take)
    ).all()
    return list(vehicles), total


def quote_vehicle_booking(
    session: Session,
    request: VehicleQuoteRequest,
    tax_rate: float = DEFAULT_TAX_RATE,
    now: datetime | None = None,
) -> VehicleBookingQuote:
    if not is_date_range_valid(request.pickup_date, request.dropoff_date, _now(now)):
        raise validation_error("Pickup date must be in the future and before the dropoff date")

    vehicle = get_vehicle(session, request.vehicle_id)
    number_of_days = calculate_number_of_days(request.pickup_date, request.dropoff_date)
    breakdown = calculate_vehicle_booking_price(float(vehicle.price_per_day), number_of_days, tax_rate)

    return VehicleBookingQuote(
        vehicle_id=vehicle.id,
        pickup_date=request.pickup_date,
        dropoff_date=request.dropoff_date,
        number_of_days=number_of_days,
        price_per_day=float(vehicle.price_per_day),
        **breakdown.model_dump(),
    )


def create_vehicle_booking(
    session: Session,
    payload: CreateVehicleBookingInput,
    tax_rate: float = DEFAULT_TAX_RATE,
    now: datetime | None = None,
) -> VehicleBooking:
    quote = quote_vehicle_booking(
        session,
        VehicleQuoteRequest(
            vehicle_id=payload.vehicle_id,
            pickup_date=payload.pickup_date,
            dropoff_date=payload.dropoff_date,
        ),
        tax_rate,
        now,
    )

    # Row lock held until commit so overlapping requests for one vehicle serialize
    vehicle = get_vehicle(session, payload.vehicle_id, lock=True)
    if vehicle.status != VehicleStatus.AVAILABLE.value:
        raise conflict_error("Vehicle is not available for booking")
    if has_overlapping_booking(session, vehicle.id, payload.pickup_date, payload.dropoff_date):
        raise conflict_error("Vehicle is already booked for the selected dates")

    customer = resolve_customer(session, payload.customer_id, payload.customer)

    booking = VehicleBooking(
        booking_number=generate_booking_number(BookingType.VEHICLE),
        customer_id=customer.id,
        vehicle_id=vehicle.id,
        pickup_location_id=payload.pickup_location_id,
        dropoff_location_id=payload.dropoff_location_id,
        pickup_date=payload.pickup_date,
        dropoff_date=payload.dropoff_date,
        number_of_days=quote.number_of_days,
        price_per_day=quote.price_per_day,
        subtotal=quote.subtotal,
        tax=quote.tax,
        total_amount=quote.total_amount,
        payment_method=payload.payment_method.value,
        status=BookingStatus.PENDING.value,
        special_requests=payload.special_requests,
    )
    session.add(booking)
    session.flush()
    logger.info("Created vehicle booking %s for vehicle %s", booking.booking_number, vehicle.id)
    return booking


# -------- taxis --------
def get_active_category(session: Session, category_id: str) -> VehicleCategory:
    category = session.get(VehicleCategory, category_id)
    if category is None or not category.is_active:
        raise not_found_error("Vehicle category")
    return category


def quote_taxi_categories(
    session: Session,
    distance: float,
    passengers: int = 1,
    tax_rate: float = DEFAULT_TAX_RATE,
) -> list[TaxiPriceCalculation]:
    """Prices for every active category that seats the party, cheapest first."""
    categories = session.scalars(
        select(VehicleCategory)
        .where(VehicleCategory.is_active.is_(True), VehicleCategory.seats >= passengers)
        .order_by(VehicleCategory.base_price, VehicleCategory.name)
    ).all()
    return [quote_taxi_category(category, distance, tax_rate) for category in categories]


def create_taxi_booking(
    session: Session,
    payload: CreateTaxiBookingInput,
    tax_rate: float = DEFAULT_TAX_RATE,
    now: datetime | None = None,
) -> TaxiBooking:
    if is_date_in_past(payload.pickup_date_time, _now(now)):
        raise validation_error("Pickup time must be in the future")

    category = get_active_category(session, payload.category_id)
    if payload.passengers > category.seats:
        raise validation_error(f"{category.name} seats at most {category.seats} passengers")

    distance, duration = payload.distance, payload.duration
    if distance is None:
        route = estimate_route(
            Coordinates(latitude=payload.pickup_lat, longitude=payload.pickup_lng),
            Coordinates(latitude=payload.dropoff_lat, longitude=payload.dropoff_lng),
        )
        distance, duration = route.distance, route.duration

    quote = quote_taxi_category(category, distance, tax_rate)
    customer = resolve_customer(session, payload.customer_id, payload.customer)

    booking = TaxiBooking(
        booking_number=generate_booking_number(BookingType.TAXI),
        customer_id=customer.id,
        category_id=category.id,
        pickup_location_id=payload.pickup_location_id,
        pickup_address=payload.pickup_address,
        pickup_lat=payload.pickup_lat,
        pickup_lng=payload.pickup_lng,
        dropoff_location_id=payload.dropoff_location_id,
        dropoff_address=payload.dropoff_address,
        dropoff_lat=payload.dropoff_lat,
        dropoff_lng=payload.dropoff_lng,
        pickup_date_time=payload.pickup_date_time,
        passengers=payload.passengers,
        distance=distance,
        duration=duration,
        base_price=quote.base_price,
        price_per_km=quote.price_per_km,
        calculated_price=quote.calculated_price,
        tax=quote.tax,
        total_amount=quote.total_amount,
        status=BookingStatus.PENDING.value,
        special_requests=payload.special_requests,
    )
    session.add(booking)
    session.flush()
    logger.info("Created taxi booking %s (%s, %.2f km)", booking.booking_number, category.name, distance)
    return booking


# -------- admin --------
def confirm_booking(
    session: Session,
    payload: ConfirmBookingInput,
    now: datetime | None = None,
) -> VehicleBooking | TaxiBooking:
    model = VehicleBooking if payload.type == BookingType.VEHICLE else TaxiBooking
    booking = session.get(model, payload.booking_id)
    if booking is None:
        raise not_found_error("Booking")
    if booking.status != BookingStatus.PENDING.value:
        raise conflict_error(f"Only pending bookings can be confirmed (current status: {booking.status})")

    booking.status = BookingStatus.CONFIRMED.value
    booking.confirmed_at = _now(now)
    if payload.notes:
        booking.admin_notes = payload.notes
    session.flush()
    logger.info("Confirmed %s booking %s", payload.type.value, booking.booking_number)
    return booking
