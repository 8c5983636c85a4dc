"""
Pydantic models shared by the booking API.
"""

from transport.models.api import ApiResponse, FieldError, PaginatedResponse, PaginationMeta
from transport.models.booking import (
    BookingFilters,
    ConfirmBookingInput,
    CreateTaxiBookingInput,
    CreateVehicleBookingInput,
    CustomerInput,
    DateRange,
    TaxiQuoteRequest,
    VehicleAvailabilityQuery,
    VehicleQuoteRequest,
)
from transport.models.dashboard import DashboardStats, PendingStats, PeriodStats, RecentBooking
from transport.models.enums import BookingStatus, BookingType, PaymentMethod, VehicleStatus
from transport.models.pricing import (
    TaxiPriceBreakdown,
    TaxiPriceCalculation,
    VehicleBookingQuote,
    VehiclePriceBreakdown,
)
from transport.models.resources import LocationOut, TaxiBookingOut, VehicleBookingOut, VehicleOut
from transport.models.routing import (
    Coordinates,
    DirectionsResponse,
    DirectionsRoute,
    TaxiRouteCalculationInput,
    TaxiRouteResult,
)

__all__ = [
    "ApiResponse",
    "BookingFilters",
    "BookingStatus",
    "BookingType",
    "ConfirmBookingInput",
    "Coordinates",
    "CreateTaxiBookingInput",
    "CreateVehicleBookingInput",
    "CustomerInput",
    "DashboardStats",
    "DateRange",
    "DirectionsResponse",
    "DirectionsRoute",
    "FieldError",
    "LocationOut",
    "PaginatedResponse",
    "PaginationMeta",
    "PaymentMethod",
    "PendingStats",
    "PeriodStats",
    "RecentBooking",
    "TaxiBookingOut",
    "TaxiPriceBreakdown",
    "TaxiPriceCalculation",
    "TaxiQuoteRequest",
    "TaxiRouteCalculationInput",
    "TaxiRouteResult",
    "VehicleAvailabilityQuery",
    "VehicleBookingOut",
    "VehicleBookingQuote",
    "VehiclePriceBreakdown",
    "VehicleOut",
    "VehicleStatus",
]
