"""SQLAlchemy ORM model for the vehicles table (self-drive rentals)."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import JSON, CheckConstraint, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from transport.db.schemas.base import Base, TimestampMixin, id_column
from transport.models.enums import VehicleStatus

if TYPE_CHECKING:
    from transport.db.schemas.location import Location


class Vehicle(TimestampMixin, Base):
    __tablename__ = "vehicles"

    id: Mapped[str] = id_column()
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    brand: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(50), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    registration_no: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    color: Mapped[str | None] = mapped_column(String(30))
    seats: Mapped[int] = mapped_column(Integer, nullable=False)
    transmission: Mapped[str] = mapped_column(String(20), nullable=False)
    fuel_type: Mapped[str] = mapped_column(String(20), nullable=False)
    price_per_day: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    features: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    description: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=VehicleStatus.AVAILABLE.value)
    location_id: Mapped[str] = mapped_column(String(36), ForeignKey("locations.id"), nullable=False)
    mileage: Mapped[int | None] = mapped_column(Integer)

    location: Mapped[Location] = relationship()

    __table_args__ = (
        CheckConstraint(
            "status IN ('AVAILABLE', 'BOOKED', 'MAINTENANCE', 'UNAVAILABLE')", name="chk_vehicles_status"
        ),
        Index("idx_vehicles_location_status", "location_id", "status"),
    )
