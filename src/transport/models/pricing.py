"""Price breakdowns returned by the pricing calculators."""

from pydantic import Field

from transport.models.base import ApiModel, UtcDatetime


class VehiclePriceBreakdown(ApiModel):
    subtotal: float
    tax: float
    total_amount: float


class TaxiPriceBreakdown(ApiModel):
    calculated_price: float
    tax: float
    total_amount: float


class TaxiPriceCalculation(TaxiPriceBreakdown):
    category_id: str
    category_name: str
    seats: int
    base_price: float
    price_per_km: float
    distance: float


class VehicleBookingQuote(VehiclePriceBreakdown):
    vehicle_id: str
    pickup_date: UtcDatetime
    dropoff_date: UtcDatetime
    number_of_days: int = Field(..., ge=1)
    price_per_day: float
