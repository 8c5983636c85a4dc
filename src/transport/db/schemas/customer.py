"""SQLAlchemy ORM model for the customers table."""

from datetime import date

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from transport.db.schemas.base import Base, TimestampMixin, id_column


class Customer(TimestampMixin, Base):
    __tablename__ = "customers"

    id: Mapped[str] = id_column()
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    alternate_phone: Mapped[str | None] = mapped_column(String(20))
    address: Mapped[str | None] = mapped_column(Text)
    city: Mapped[str | None] = mapped_column(String(100))
    country: Mapped[str] = mapped_column(String(100), nullable=False, default="Kenya")
    driving_license: Mapped[str | None] = mapped_column(String(50))
    license_expiry: Mapped[date | None] = mapped_column(Date)
    license_image_url: Mapped[str | None] = mapped_column(String(512))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
