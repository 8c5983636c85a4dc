from datetime import date

from pydantic import Field, field_validator, model_validator

from transport.models.base import ApiModel, UtcDatetime
from transport.models.enums import BookingStatus, BookingType, PaymentMethod
from transport.utils.validation import is_valid_email, is_valid_phone, sanitize_phone


class CustomerInput(ApiModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str
    phone: str
    alternate_phone: str | None = None
    address: str | None = None
    city: str | None = None
    driving_license: str | None = None
    license_expiry: date | None = None
    license_image_url: str | None = None

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str) -> str:
        value = value.strip().lower()
        if not is_valid_email(value):
            raise ValueError("Invalid email address")
        return value

    @field_validator("phone", "alternate_phone")
    @classmethod
    def kenyan_phone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not is_valid_phone(value):
            raise ValueError("Invalid phone number")
        return sanitize_phone(value)


class VehicleAvailabilityQuery(ApiModel):
    pickup_date: UtcDatetime
    dropoff_date: UtcDatetime
    location_id: str | None = None

    @model_validator(mode="after")
    def dropoff_after_pickup(self) -> "VehicleAvailabilityQuery":
        if self.dropoff_date <= self.pickup_date:
            raise ValueError("dropoffDate must be after pickupDate")
        return self


class VehicleQuoteRequest(ApiModel):
    vehicle_id: str
    pickup_date: UtcDatetime
    dropoff_date: UtcDatetime


class TaxiQuoteRequest(ApiModel):
    distance: float | None = Field(default=None, gt=0)
    pickup_lat: float | None = Field(default=None, ge=-90, le=90)
    pickup_lng: float | None = Field(default=None, ge=-180, le=180)
    dropoff_lat: float | None = Field(default=None, ge=-90, le=90)
    dropoff_lng: float | None = Field(default=None, ge=-180, le=180)
    passengers: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def distance_or_coordinates(self) -> "TaxiQuoteRequest":
        coords = (self.pickup_lat, self.pickup_lng, self.dropoff_lat, self.dropoff_lng)
        if self.distance is None and any(c is None for c in coords):
            raise ValueError("Provide either distance or pickup and dropoff coordinates")
        return self


class CreateVehicleBookingInput(ApiModel):
    customer_id: str | None = None
    customer: CustomerInput | None = None
    vehicle_id: str
    pickup_date: UtcDatetime
    dropoff_date: UtcDatetime
    pickup_location_id: str
    dropoff_location_id: str
    payment_method: PaymentMethod
    special_requests: str | None = Field(default=None, max_length=1000)

    @model_validator(mode="after")
    def customer_reference(self) -> "CreateVehicleBookingInput":
        if self.customer_id is None and self.customer is None:
            raise ValueError("Either customerId or customer is required")
        return self


class CreateTaxiBookingInput(ApiModel):
    customer_id: str | None = None
    customer: CustomerInput | None = None
    pickup_location_id: str
    pickup_address: str
    pickup_lat: float = Field(..., ge=-90, le=90)
    pickup_lng: float = Field(..., ge=-180, le=180)
    dropoff_location_id: str
    dropoff_address: str
    dropoff_lat: float = Field(..., ge=-90, le=90)
    dropoff_lng: float = Field(..., ge=-180, le=180)
    category_id: str
    pickup_date_time: UtcDatetime
    passengers: int = Field(..., ge=1)
    # Route distance (km) and duration (min) from the directions provider, when the client has them
    distance: float | None = Field(default=None, gt=0)
    duration: float | None = Field(default=None, ge=0)
    special_requests: str | None = Field(default=None, max_length=1000)

    @model_validator(mode="after")
    def customer_reference(self) -> "CreateTaxiBookingInput":
        if self.customer_id is None and self.customer is None:
            raise ValueError("Either customerId or customer is required")
        return self


class ConfirmBookingInput(ApiModel):
    booking_id: str
    type: BookingType
    notes: str | None = None


class BookingFilters(ApiModel):
    status: BookingStatus | None = None
    type: BookingType | None = None
    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None
    search: str | None = None
    page: int | None = None
    limit: int | None = None


class DateRange(ApiModel):
    start: UtcDatetime
    end: UtcDatetime
