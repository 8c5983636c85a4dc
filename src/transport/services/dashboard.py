"""Admin dashboard aggregates."""

from datetime import datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from transport.db.schemas import TaxiBooking, VehicleBooking
from transport.models.dashboard import DashboardStats, PendingStats, PeriodStats, RecentBooking
from transport.models.enums import BookingStatus, BookingType
from transport.services.pricing import round_money

RECENT_LIMIT = 10

_BOOKING_MODELS = {BookingType.VEHICLE: VehicleBooking, BookingType.TAXI: TaxiBooking}


def period_starts(now: datetime, tz: str) -> dict[str, datetime]:
    """Start of today, this week (Monday) and this month in local time, as UTC."""
    local = now.astimezone(ZoneInfo(tz))
    today = datetime.combine(local.date(), time.min, tzinfo=local.tzinfo)
    week = today - timedelta(days=today.weekday())
    month = today.replace(day=1)
    starts = {"today": today, "week": week, "month": month}
    return {name: start.astimezone(timezone.utc) for name, start in starts.items()}


def _period_stats(session: Session, since: datetime) -> PeriodStats:
    stats = PeriodStats()
    for booking_type, model in _BOOKING_MODELS.items():
        count, revenue = session.execute(
            select(
                func.count(model.id),
                func.coalesce(
                    func.sum(model.total_amount).filter(model.status != BookingStatus.CANCELLED.value),
                    0,
                ),
            ).where(model.created_at >= since)
        ).one()
        if booking_type == BookingType.VEHICLE:
            stats.vehicle_bookings = count
        else:
            stats.taxi_bookings = count
        stats.total_revenue = round_money(stats.total_revenue + float(revenue))
    return stats


def _pending_count(session: Session, model: type[VehicleBooking] | type[TaxiBooking]) -> int:
    return session.scalar(select(func.count(model.id)).where(model.status == BookingStatus.PENDING.value)) or 0


def _recent_bookings(session: Session) -> list[RecentBooking]:
    recent: list[RecentBooking] = []
    for booking_type, model in _BOOKING_MODELS.items():
        rows = session.scalars(
            select(model).options(selectinload(model.customer)).order_by(model.created_at.desc()).limit(RECENT_LIMIT)
        ).all()
        recent.extend(
            RecentBooking(
                id=row.id,
                type=booking_type,
                booking_number=row.booking_number,
                customer_name=row.customer.full_name,
                amount=float(row.total_amount),
                status=BookingStatus(row.status),
                created_at=row.created_at,
            )
            for row in rows
        )
    recent.sort(key=lambda booking: booking.created_at, reverse=True)
    return recent[:RECENT_LIMIT]


def compute_dashboard_stats(
    session: Session,
    now: datetime | None = None,
    tz: str = "Africa/Nairobi",
) -> DashboardStats:
    starts = period_starts(now or datetime.now(timezone.utc), tz)
    return DashboardStats(
        today=_period_stats(session, starts["today"]),
        this_week=_period_stats(session, starts["week"]),
        this_month=_period_stats(session, starts["month"]),
        pending=PendingStats(
            vehicle_bookings=_pending_count(session, VehicleBooking),
            taxi_bookings=_pending_count(session, TaxiBooking),
        ),
        recent_bookings=_recent_bookings(session),
    )
