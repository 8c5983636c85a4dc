"""Read models for persisted entities, built with ``model_validate(orm_obj)``."""

from datetime import datetime

from transport.models.base import ApiModel
from transport.models.enums import BookingStatus, PaymentMethod, VehicleStatus


class LocationOut(ApiModel):
    id: str
    name: str
    city: str
    address: str
    latitude: float
    longitude: float


class VehicleOut(ApiModel):
    id: str
    name: str
    brand: str
    model: str
    year: int
    registration_no: str
    color: str | None
    seats: int
    transmission: str
    fuel_type: str
    price_per_day: float
    images: list[str]
    features: list[str]
    description: str | None
    status: VehicleStatus
    location_id: str
    mileage: int | None


class VehicleBookingOut(ApiModel):
    id: str
    booking_number: str
    customer_id: str
    vehicle_id: str
    pickup_location_id: str
    dropoff_location_id: str
    pickup_date: datetime
    dropoff_date: datetime
    number_of_days: int
    price_per_day: float
    subtotal: float
    tax: float
    total_amount: float
    payment_method: PaymentMethod
    status: BookingStatus
    special_requests: str | None
    confirmed_at: datetime | None = None


class TaxiBookingOut(ApiModel):
    id: str
    booking_number: str
    customer_id: str
    category_id: str
    pickup_location_id: str
    pickup_address: str
    dropoff_location_id: str
    dropoff_address: str
    pickup_date_time: datetime
    passengers: int
    distance: float
    duration: float | None
    base_price: float
    price_per_km: float
    calculated_price: float
    tax: float
    total_amount: float
    status: BookingStatus
    special_requests: str | None
    confirmed_at: datetime | None = None
