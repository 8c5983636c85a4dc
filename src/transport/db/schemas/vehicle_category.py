"""SQLAlchemy ORM model for the vehicle_categories table (taxi tiers)."""

from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from transport.db.schemas.base import Base, TimestampMixin, id_column


class VehicleCategory(TimestampMixin, Base):
    __tablename__ = "vehicle_categories"

    id: Mapped[str] = id_column()
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text)
    seats: Mapped[int] = mapped_column(Integer, nullable=False)
    base_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    price_per_km: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    image: Mapped[str | None] = mapped_column(String(255))
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (CheckConstraint("seats > 0", name="chk_vehicle_categories_seats"),)
