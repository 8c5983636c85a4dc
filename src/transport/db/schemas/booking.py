"""SQLAlchemy ORM models for the vehicle_bookings and taxi_bookings tables."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from transport.db.schemas.base import Base, TimestampMixin, id_column
from transport.models.enums import BookingStatus

if TYPE_CHECKING:
    from transport.db.schemas.customer import Customer
    from transport.db.schemas.location import Location
    from transport.db.schemas.vehicle import Vehicle
    from transport.db.schemas.vehicle_category import VehicleCategory

_STATUS_CHECK = "status IN ('PENDING', 'CONFIRMED', 'IN_PROGRESS', 'COMPLETED', 'CANCELLED')"


class VehicleBooking(TimestampMixin, Base):
    __tablename__ = "vehicle_bookings"

    id: Mapped[str] = id_column()
    booking_number: Mapped[str] = mapped_column(String(30), nullable=False, unique=True)
    customer_id: Mapped[str] = mapped_column(String(36), ForeignKey("customers.id"), nullable=False)
    vehicle_id: Mapped[str] = mapped_column(String(36), ForeignKey("vehicles.id"), nullable=False)
    pickup_location_id: Mapped[str] = mapped_column(String(36), ForeignKey("locations.id"), nullable=False)
    dropoff_location_id: Mapped[str] = mapped_column(String(36), ForeignKey("locations.id"), nullable=False)
    pickup_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    dropoff_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    number_of_days: Mapped[int] = mapped_column(Integer, nullable=False)
    price_per_day: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    subtotal: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    tax: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    payment_method: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=BookingStatus.PENDING.value)
    special_requests: Mapped[str | None] = mapped_column(Text)
    admin_notes: Mapped[str | None] = mapped_column(Text)
    confirmed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    customer: Mapped[Customer] = relationship()
    vehicle: Mapped[Vehicle] = relationship()
    pickup_location: Mapped[Location] = relationship(foreign_keys=[pickup_location_id])
    dropoff_location: Mapped[Location] = relationship(foreign_keys=[dropoff_location_id])

    __table_args__ = (
        CheckConstraint(_STATUS_CHECK, name="chk_vehicle_bookings_status"),
        CheckConstraint("dropoff_date > pickup_date", name="chk_vehicle_bookings_dates"),
        Index("idx_vehicle_bookings_vehicle_dates", "vehicle_id", "pickup_date", "dropoff_date"),
        Index("idx_vehicle_bookings_status", "status"),
    )


class TaxiBooking(TimestampMixin, Base):
    __tablename__ = "taxi_bookings"

    id: Mapped[str] = id_column()
    booking_number: Mapped[str] = mapped_column(String(30), nullable=False, unique=True)
    customer_id: Mapped[str] = mapped_column(String(36), ForeignKey("customers.id"), nullable=False)
    category_id: Mapped[str] = mapped_column(String(36), ForeignKey("vehicle_categories.id"), nullable=False)
    pickup_location_id: Mapped[str] = mapped_column(String(36), ForeignKey("locations.id"), nullable=False)
    dropoff_location_id: Mapped[str] = mapped_column(String(36), ForeignKey("locations.id"), nullable=False)
    pickup_address: Mapped[str] = mapped_column(Text, nullable=False)
    pickup_lat: Mapped[float] = mapped_column(Float, nullable=False)
    pickup_lng: Mapped[float] = mapped_column(Float, nullable=False)
    dropoff_address: Mapped[str] = mapped_column(Text, nullable=False)
    dropoff_lat: Mapped[float] = mapped_column(Float, nullable=False)
    dropoff_lng: Mapped[float] = mapped_column(Float, nullable=False)
    pickup_date_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    passengers: Mapped[int] = mapped_column(Integer, nullable=False)
    distance: Mapped[float] = mapped_column(Float, nullable=False)
    duration: Mapped[float | None] = mapped_column(Float)
    base_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    price_per_km: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    calculated_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    tax: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=BookingStatus.PENDING.value)
    special_requests: Mapped[str | None] = mapped_column(Text)
    admin_notes: Mapped[str | None] = mapped_column(Text)
    confirmed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    customer: Mapped[Customer] = relationship()
    category: Mapped[VehicleCategory] = relationship()
    pickup_location: Mapped[Location] = relationship(foreign_keys=[pickup_location_id])
    dropoff_location: Mapped[Location] = relationship(foreign_keys=[dropoff_location_id])

    __table_args__ = (
        CheckConstraint(_STATUS_CHECK, name="chk_taxi_bookings_status"),
        CheckConstraint("passengers > 0", name="chk_taxi_bookings_passengers"),
        Index("idx_taxi_bookings_status", "status"),
    )
