from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
from sqlalchemy import select

from transport.db.schemas import Customer, TaxiBooking, Vehicle, VehicleBooking, VehicleCategory
from transport.errors import AppError, ErrorKind
from transport.models import (
    ConfirmBookingInput,
    CreateTaxiBookingInput,
    CreateVehicleBookingInput,
    CustomerInput,
    VehicleAvailabilityQuery,
    VehicleQuoteRequest,
)
from transport.models.enums import BookingStatus, BookingType, PaymentMethod, VehicleStatus
from transport.services.booking import (
    confirm_booking,
    create_taxi_booking,
    create_vehicle_booking,
    find_available_vehicles,
    has_overlapping_booking,
    quote_taxi_categories,
    quote_vehicle_booking,
    resolve_customer,
)
from transport.utils.pagination import get_pagination_params

NOW = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)
PICKUP = datetime(2026, 11, 1, 9, 0, tzinfo=timezone.utc)
DROPOFF = PICKUP + timedelta(days=3)

NEW_CUSTOMER = CustomerInput(first_name="Jane", last_name="Wanjiku", email="jane@example.com", phone="0722000111")


def _vehicle(session, registration_no="KCA 123A"):
    return session.scalars(select(Vehicle).where(Vehicle.registration_no == registration_no)).one()


def _category(session, name):
    return session.scalars(select(VehicleCategory).where(VehicleCategory.name == name)).one()


def _book_vehicle(session, vehicle, pickup=PICKUP, dropoff=DROPOFF, customer=NEW_CUSTOMER):
    return create_vehicle_booking(
        session,
        CreateVehicleBookingInput(
            customer=customer,
            vehicle_id=vehicle.id,
            pickup_date=pickup,
            dropoff_date=dropoff,
            pickup_location_id="nairobi-loc",
            dropoff_location_id="nairobi-loc",
            payment_method=PaymentMethod.MPESA,
        ),
        now=NOW,
    )


def _taxi_input(session, **overrides):
    fields = dict(
        customer_id=session.scalars(select(Customer)).first().id,
        pickup_location_id="nairobi-loc",
        pickup_address="Kenyatta Avenue",
        pickup_lat=-1.2864,
        pickup_lng=36.8172,
        dropoff_location_id="nairobi-loc",
        dropoff_address="JKIA Terminal 1A",
        dropoff_lat=-1.3192,
        dropoff_lng=36.9278,
        category_id=_category(session, "Sedan").id,
        pickup_date_time=NOW + timedelta(hours=2),
        passengers=2,
        distance=10,
    )
    fields.update(overrides)
    return CreateTaxiBookingInput(**fields)


def _available(session, pickup=PICKUP, dropoff=DROPOFF, location_id=None, page=1, limit=20):
    query = VehicleAvailabilityQuery(pickup_date=pickup, dropoff_date=dropoff, location_id=location_id)
    return find_available_vehicles(session, query, get_pagination_params(page, limit))


# --- customers ---


def test_resolve_customer_by_id(seeded_session):
    existing = seeded_session.scalars(select(Customer)).one()
    assert resolve_customer(seeded_session, existing.id, None) is existing


def test_resolve_customer_unknown_id(seeded_session):
    with pytest.raises(AppError) as exc_info:
        resolve_customer(seeded_session, "no-such-customer", None)
    assert exc_info.value.message == "Customer not found"


def test_resolve_customer_reuses_email(seeded_session):
    details = NEW_CUSTOMER.model_copy(update={"email": "john.doe@example.com"})
    customer = resolve_customer(seeded_session, None, details)
    assert customer.first_name == "John"


def test_resolve_customer_creates_new(seeded_session):
    customer = resolve_customer(seeded_session, None, NEW_CUSTOMER)
    assert customer.id
    assert customer.phone == "+254722000111"
    assert customer.country == "Kenya"


def test_resolve_customer_needs_reference(seeded_session):
    with pytest.raises(AppError) as exc_info:
        resolve_customer(seeded_session, None, None)
    assert exc_info.value.kind == ErrorKind.VALIDATION


# --- availability ---


def test_all_seeded_vehicles_available_cheapest_first(seeded_session):
    vehicles, total = _available(seeded_session)
    assert total == 5
    assert [v.registration_no for v in vehicles] == ["KCD 234D", "KCA 123A", "KCC 789C", "KCB 456B", "KCE 567E"]


def test_availability_filtered_by_location(seeded_session):
    vehicles, total = _available(seeded_session, location_id="nairobi-loc")
    assert total == 3
    assert all(v.location_id == "nairobi-loc" for v in vehicles)


def test_availability_paginates(seeded_session):
    vehicles, total = _available(seeded_session, page=3, limit=2)
    assert total == 5
    assert [v.registration_no for v in vehicles] == ["KCE 567E"]


def test_overlapping_booking_hides_vehicle(seeded_session):
    corolla = _vehicle(seeded_session)
    _book_vehicle(seeded_session, corolla)

    vehicles, total = _available(seeded_session, PICKUP + timedelta(days=2), DROPOFF + timedelta(days=2))
    assert total == 4
    assert corolla.id not in {v.id for v in vehicles}


def test_back_to_back_booking_does_not_overlap(seeded_session):
    corolla = _vehicle(seeded_session)
    _book_vehicle(seeded_session, corolla)

    assert not has_overlapping_booking(seeded_session, corolla.id, DROPOFF, DROPOFF + timedelta(days=1))
    assert has_overlapping_booking(seeded_session, corolla.id, DROPOFF - timedelta(hours=1), DROPOFF)
    assert _available(seeded_session, DROPOFF, DROPOFF + timedelta(days=1))[1] == 5


def test_cancelled_booking_frees_vehicle(seeded_session):
    corolla = _vehicle(seeded_session)
    booking = _book_vehicle(seeded_session, corolla)
    booking.status = BookingStatus.CANCELLED.value
    seeded_session.flush()

    assert not has_overlapping_booking(seeded_session, corolla.id, PICKUP, DROPOFF)


def test_vehicle_in_maintenance_not_listed(seeded_session):
    _vehicle(seeded_session).status = VehicleStatus.MAINTENANCE.value
    seeded_session.flush()
    assert _available(seeded_session)[1] == 4


# --- vehicle quotes and bookings ---


def test_quote_vehicle_booking(seeded_session):
    corolla = _vehicle(seeded_session)
    quote = quote_vehicle_booking(
        seeded_session,
        VehicleQuoteRequest(vehicle_id=corolla.id, pickup_date=PICKUP, dropoff_date=DROPOFF),
        now=NOW,
    )
    assert quote.number_of_days == 3
    assert quote.price_per_day == 3500
    assert quote.subtotal == 10500
    assert quote.tax == 1680
    assert quote.total_amount == 12180


def test_quote_partial_day_charged_as_full_day(seeded_session):
    corolla = _vehicle(seeded_session)
    quote = quote_vehicle_booking(
        seeded_session,
        VehicleQuoteRequest(vehicle_id=corolla.id, pickup_date=PICKUP, dropoff_date=PICKUP + timedelta(hours=30)),
        now=NOW,
    )
    assert quote.number_of_days == 2


def test_quote_rejects_past_pickup(seeded_session):
    corolla = _vehicle(seeded_session)
    with pytest.raises(AppError) as exc_info:
        quote_vehicle_booking(
            seeded_session,
            VehicleQuoteRequest(vehicle_id=corolla.id, pickup_date=NOW - timedelta(days=1), dropoff_date=DROPOFF),
            now=NOW,
        )
    assert exc_info.value.status_code == 422


def test_quote_unknown_vehicle(seeded_session):
    with pytest.raises(AppError) as exc_info:
        quote_vehicle_booking(
            seeded_session,
            VehicleQuoteRequest(vehicle_id="missing", pickup_date=PICKUP, dropoff_date=DROPOFF),
            now=NOW,
        )
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Vehicle not found"


def test_create_vehicle_booking(seeded_session):
    booking = _book_vehicle(seeded_session, _vehicle(seeded_session))

    assert booking.booking_number.startswith("VR-")
    assert booking.status == BookingStatus.PENDING.value
    assert booking.payment_method == "MPESA"
    assert booking.number_of_days == 3
    assert booking.total_amount == 12180
    assert booking.customer.email == "jane@example.com"


def test_create_vehicle_booking_conflicts_with_active_booking(seeded_session):
    corolla = _vehicle(seeded_session)
    _book_vehicle(seeded_session, corolla)

    with pytest.raises(AppError) as exc_info:
        _book_vehicle(seeded_session, corolla, PICKUP + timedelta(days=1), DROPOFF + timedelta(days=1))
    assert exc_info.value.kind == ErrorKind.CONFLICT
    assert len(seeded_session.scalars(select(VehicleBooking)).all()) == 1


def test_create_vehicle_booking_unavailable_vehicle(seeded_session):
    corolla = _vehicle(seeded_session)
    corolla.status = VehicleStatus.MAINTENANCE.value
    seeded_session.flush()

    with pytest.raises(AppError) as exc_info:
        _book_vehicle(seeded_session, corolla)
    assert exc_info.value.status_code == 409


def test_create_vehicle_booking_locks_vehicle_row(seeded_session):
    corolla = _vehicle(seeded_session)

    with patch.object(seeded_session, "get", wraps=seeded_session.get) as get:
        _book_vehicle(seeded_session, corolla)

    locked = [c for c in get.call_args_list if c.kwargs.get("with_for_update")]
    assert len(locked) == 1
    assert locked[0].args == (Vehicle, corolla.id)


# --- taxis ---


def test_quote_taxi_categories(seeded_session):
    quotes = quote_taxi_categories(seeded_session, distance=10)
    assert [q.category_name for q in quotes] == ["Sedan", "SUV", "Executive", "Van"]
    sedan = quotes[0]
    assert (sedan.calculated_price, sedan.tax, sedan.total_amount) == (2500, 400, 2900)


def test_quote_taxi_categories_filters_by_seats(seeded_session):
    quotes = quote_taxi_categories(seeded_session, distance=10, passengers=5)
    assert [q.category_name for q in quotes] == ["SUV", "Van"]


def test_quote_taxi_categories_skips_inactive(seeded_session):
    _category(seeded_session, "Sedan").is_active = False
    seeded_session.flush()
    assert "Sedan" not in [q.category_name for q in quote_taxi_categories(seeded_session, distance=10)]


def test_create_taxi_booking(seeded_session):
    booking = create_taxi_booking(seeded_session, _taxi_input(seeded_session), now=NOW)

    assert booking.booking_number.startswith("TX-")
    assert booking.status == BookingStatus.PENDING.value
    assert booking.distance == 10
    assert booking.calculated_price == 2500
    assert booking.total_amount == 2900


def test_create_taxi_booking_estimates_distance(seeded_session):
    booking = create_taxi_booking(seeded_session, _taxi_input(seeded_session, distance=None), now=NOW)
    assert booking.distance == pytest.approx(12.8, abs=0.5)
    assert booking.duration > 0


def test_create_taxi_booking_too_many_passengers(seeded_session):
    with pytest.raises(AppError) as exc_info:
        create_taxi_booking(seeded_session, _taxi_input(seeded_session, passengers=5), now=NOW)
    assert exc_info.value.kind == ErrorKind.VALIDATION


def test_create_taxi_booking_past_pickup(seeded_session):
    with pytest.raises(AppError) as exc_info:
        create_taxi_booking(
            seeded_session, _taxi_input(seeded_session, pickup_date_time=NOW - timedelta(minutes=5)), now=NOW
        )
    assert exc_info.value.message == "Pickup time must be in the future"


def test_create_taxi_booking_unknown_category(seeded_session):
    with pytest.raises(AppError) as exc_info:
        create_taxi_booking(seeded_session, _taxi_input(seeded_session, category_id="missing"), now=NOW)
    assert exc_info.value.status_code == 404


# --- confirmation ---


def test_confirm_vehicle_booking(seeded_session):
    booking = _book_vehicle(seeded_session, _vehicle(seeded_session))
    confirmed = confirm_booking(
        seeded_session,
        ConfirmBookingInput(booking_id=booking.id, type=BookingType.VEHICLE, notes="ID checked"),
        now=NOW,
    )
    assert confirmed.status == BookingStatus.CONFIRMED.value
    assert confirmed.confirmed_at == NOW
    assert confirmed.admin_notes == "ID checked"


def test_confirm_taxi_booking_twice_conflicts(seeded_session):
    booking = create_taxi_booking(seeded_session, _taxi_input(seeded_session), now=NOW)
    payload = ConfirmBookingInput(booking_id=booking.id, type=BookingType.TAXI)
    confirm_booking(seeded_session, payload, now=NOW)

    with pytest.raises(AppError) as exc_info:
        confirm_booking(seeded_session, payload, now=NOW)
    assert exc_info.value.kind == ErrorKind.CONFLICT


def test_confirm_booking_wrong_type_not_found(seeded_session):
    booking = create_taxi_booking(seeded_session, _taxi_input(seeded_session), now=NOW)
    with pytest.raises(AppError) as exc_info:
        confirm_booking(seeded_session, ConfirmBookingInput(booking_id=booking.id, type=BookingType.VEHICLE))
    assert exc_info.value.message == "Booking not found"
    assert seeded_session.get(TaxiBooking, booking.id).status == BookingStatus.PENDING.value
