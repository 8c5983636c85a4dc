from transport.models.base import ApiModel, UtcDatetime
from transport.models.enums import BookingStatus, BookingType


class PeriodStats(ApiModel):
    vehicle_bookings: int = 0
    taxi_bookings: int = 0
    total_revenue: float = 0.0


class PendingStats(ApiModel):
    vehicle_bookings: int = 0
    taxi_bookings: int = 0


class RecentBooking(ApiModel):
    id: str
    type: BookingType
    booking_number: str
    customer_name: str
    amount: float
    status: BookingStatus
    created_at: UtcDatetime


class DashboardStats(ApiModel):
    today: PeriodStats
    this_week: PeriodStats
    this_month: PeriodStats
    pending: PendingStats
    recent_bookings: list[RecentBooking] = []
