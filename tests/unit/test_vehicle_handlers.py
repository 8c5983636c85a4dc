"""Handler tests for vehicle listing, quoting and booking, backed by in-memory SQLite."""

import json
import os
from unittest.mock import patch

import pytest
from sqlalchemy import select

from handlers import confirm_booking, create_vehicle_booking, list_vehicles, vehicle_quote
from transport.db.schemas import Vehicle, VehicleBooking

PICKUP = "2030-03-02T09:00:00Z"
DROPOFF = "2030-03-05T09:00:00Z"


@pytest.fixture(autouse=True)
def _local_env():
    with patch.dict(os.environ, {"ENVIRONMENT": "test"}, clear=True):
        yield


def _body(response):
    return json.loads(response["body"])


def _vehicle_id(database, registration_no="KCA 123A"):
    with database.session() as session:
        return session.scalars(select(Vehicle.id).where(Vehicle.registration_no == registration_no)).one()


def _booking_event(vehicle_id, **overrides):
    payload = {
        "customer": {
            "firstName": "Jane",
            "lastName": "Wanjiku",
            "email": "jane@example.com",
            "phone": "0722000111",
        },
        "vehicleId": vehicle_id,
        "pickupDate": PICKUP,
        "dropoffDate": DROPOFF,
        "pickupLocationId": "nairobi-loc",
        "dropoffLocationId": "nairobi-loc",
        "paymentMethod": "MPESA",
    }
    payload.update(overrides)
    return {"body": json.dumps(payload)}


# --- GET /vehicles ---


def test_list_vehicles(seeded_database):
    event = {"queryStringParameters": {"pickupDate": PICKUP, "dropoffDate": DROPOFF}}
    with patch("handlers.list_vehicles.get_database", return_value=seeded_database):
        response = list_vehicles.handler(event, None)

    assert response["statusCode"] == 200
    body = _body(response)
    assert body["success"] is True
    assert body["pagination"] == {"page": 1, "limit": 20, "total": 5, "totalPages": 1}
    cheapest = body["data"][0]
    assert cheapest["registrationNo"] == "KCD 234D"
    assert cheapest["pricePerDay"] == 2800
    assert cheapest["status"] == "AVAILABLE"


def test_list_vehicles_paginated_by_location(seeded_database):
    event = {
        "queryStringParameters": {
            "pickupDate": PICKUP,
            "dropoffDate": DROPOFF,
            "locationId": "nairobi-loc",
            "page": "2",
            "limit": "2",
        }
    }
    with patch("handlers.list_vehicles.get_database", return_value=seeded_database):
        body = _body(list_vehicles.handler(event, None))

    assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "totalPages": 2}
    assert [v["registrationNo"] for v in body["data"]] == ["KCE 567E"]


def test_list_vehicles_requires_dates(seeded_database):
    with patch("handlers.list_vehicles.get_database", return_value=seeded_database):
        response = list_vehicles.handler({"queryStringParameters": None}, None)
    assert response["statusCode"] == 422
    assert _body(response)["error"] == "pickupDate and dropoffDate are required"


def test_list_vehicles_invalid_date(seeded_database):
    event = {"queryStringParameters": {"pickupDate": "next tuesday", "dropoffDate": DROPOFF}}
    with patch("handlers.list_vehicles.get_database", return_value=seeded_database):
        response = list_vehicles.handler(event, None)
    assert response["statusCode"] == 422
    assert _body(response)["error"] == "Invalid date format: next tuesday"


def test_list_vehicles_reversed_range(seeded_database):
    event = {"queryStringParameters": {"pickupDate": DROPOFF, "dropoffDate": PICKUP}}
    with patch("handlers.list_vehicles.get_database", return_value=seeded_database):
        response = list_vehicles.handler(event, None)
    assert response["statusCode"] == 422
    assert _body(response)["error"] == "Validation Error"


# --- POST /vehicles/quote ---


def test_vehicle_quote(seeded_database):
    payload = {"vehicleId": _vehicle_id(seeded_database), "pickupDate": PICKUP, "dropoffDate": DROPOFF}
    event = {"body": json.dumps(payload)}
    with patch("handlers.vehicle_quote.get_database", return_value=seeded_database):
        response = vehicle_quote.handler(event, None)

    assert response["statusCode"] == 200
    quote = _body(response)["data"]
    assert quote["numberOfDays"] == 3
    assert quote["subtotal"] == 10500
    assert quote["tax"] == 1680
    assert quote["totalAmount"] == 12180


def test_vehicle_quote_unknown_vehicle(seeded_database):
    event = {"body": json.dumps({"vehicleId": "missing", "pickupDate": PICKUP, "dropoffDate": DROPOFF})}
    with patch("handlers.vehicle_quote.get_database", return_value=seeded_database):
        response = vehicle_quote.handler(event, None)
    assert response["statusCode"] == 404
    assert _body(response) == {"success": False, "error": "Vehicle not found"}


def test_vehicle_quote_invalid_json(seeded_database):
    with patch("handlers.vehicle_quote.get_database", return_value=seeded_database):
        response = vehicle_quote.handler({"body": "{"}, None)
    assert response["statusCode"] == 400


# --- POST /bookings/vehicle ---


def test_create_vehicle_booking(seeded_database):
    vehicle_id = _vehicle_id(seeded_database)
    with patch("handlers.create_vehicle_booking.get_database", return_value=seeded_database):
        response = create_vehicle_booking.handler(_booking_event(vehicle_id), None)

    assert response["statusCode"] == 201
    body = _body(response)
    assert body["message"] == "Booking created successfully"
    assert body["data"]["bookingNumber"].startswith("VR-")
    assert body["data"]["status"] == "PENDING"
    assert body["data"]["totalAmount"] == 12180

    with seeded_database.session() as session:
        assert session.scalars(select(VehicleBooking)).one().vehicle_id == vehicle_id


def test_create_vehicle_booking_double_booked(seeded_database):
    vehicle_id = _vehicle_id(seeded_database)
    with patch("handlers.create_vehicle_booking.get_database", return_value=seeded_database):
        create_vehicle_booking.handler(_booking_event(vehicle_id), None)
        response = create_vehicle_booking.handler(_booking_event(vehicle_id), None)

    assert response["statusCode"] == 409
    assert _body(response)["error"] == "Vehicle is already booked for the selected dates"


def test_create_vehicle_booking_invalid_phone(seeded_database):
    event = _booking_event(
        _vehicle_id(seeded_database),
        customer={"firstName": "Jane", "lastName": "W", "email": "jane@example.com", "phone": "12345"},
    )
    with patch("handlers.create_vehicle_booking.get_database", return_value=seeded_database):
        response = create_vehicle_booking.handler(event, None)

    assert response["statusCode"] == 422
    assert [e["field"] for e in _body(response)["data"]["errors"]] == ["customer.phone"]


def test_create_vehicle_booking_unknown_location(seeded_database):
    event = _booking_event(_vehicle_id(seeded_database), dropoffLocationId="atlantis-loc")
    with patch("handlers.create_vehicle_booking.get_database", return_value=seeded_database):
        response = create_vehicle_booking.handler(event, None)

    assert response["statusCode"] == 400
    assert _body(response)["error"] == "Invalid reference to related resource"


# --- POST /admin/bookings/confirm ---


def test_confirm_vehicle_booking(seeded_database):
    with patch("handlers.create_vehicle_booking.get_database", return_value=seeded_database):
        created = _body(create_vehicle_booking.handler(_booking_event(_vehicle_id(seeded_database)), None))["data"]

    event = {"body": json.dumps({"bookingId": created["id"], "type": "vehicle", "notes": "Paid in full"})}
    with patch("handlers.confirm_booking.get_database", return_value=seeded_database):
        response = confirm_booking.handler(event, None)
        again = confirm_booking.handler(event, None)

    assert response["statusCode"] == 200
    data = _body(response)["data"]
    assert data["status"] == "CONFIRMED"
    assert data["confirmedAt"] is not None
    assert again["statusCode"] == 409
