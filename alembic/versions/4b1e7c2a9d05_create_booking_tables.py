"""create_booking_tables

Revision ID: 4b1e7c2a9d05
Revises: 
Create Date: 2026-10-19 09:12:44.201733

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e7c2a9d05'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

BOOKING_STATUS_CHECK = "status IN ('PENDING', 'CONFIRMED', 'IN_PROGRESS', 'COMPLETED', 'CANCELLED')"


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def _money(name: str) -> sa.Column:
    return sa.Column(name, sa.Numeric(12, 2), nullable=False)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "locations",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("idx_locations_city", "locations", ["city"])

    op.create_table(
        "vehicle_categories",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(50), nullable=False, unique=True),
        sa.Column("description", sa.Text),
        sa.Column("seats", sa.Integer, nullable=False),
        _money("base_price"),
        _money("price_per_km"),
        sa.Column("image", sa.String(255)),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint("seats > 0", name="chk_vehicle_categories_seats"),
    )

    op.create_table(
        "vehicles",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("brand", sa.String(50), nullable=False),
        sa.Column("model", sa.String(50), nullable=False),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("registration_no", sa.String(20), nullable=False, unique=True),
        sa.Column("color", sa.String(30)),
        sa.Column("seats", sa.Integer, nullable=False),
        sa.Column("transmission", sa.String(20), nullable=False),
        sa.Column("fuel_type", sa.String(20), nullable=False),
        _money("price_per_day"),
        sa.Column("images", sa.JSON, nullable=False),
        sa.Column("features", sa.JSON, nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("status", sa.String(20), nullable=False, server_default="AVAILABLE"),
        sa.Column("location_id", sa.String(36), sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("mileage", sa.Integer),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('AVAILABLE', 'BOOKED', 'MAINTENANCE', 'UNAVAILABLE')", name="chk_vehicles_status"
        ),
    )
    op.create_index("idx_vehicles_location_status", "vehicles", ["location_id", "status"])

    op.create_table(
        "customers",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("phone", sa.String(20), nullable=False),
        sa.Column("alternate_phone", sa.String(20)),
        sa.Column("address", sa.Text),
        sa.Column("city", sa.String(100)),
        sa.Column("country", sa.String(100), nullable=False, server_default="Kenya"),
        sa.Column("driving_license", sa.String(50)),
        sa.Column("license_expiry", sa.Date),
        sa.Column("license_image_url", sa.String(512)),
        *_timestamps(),
    )

    op.create_table(
        "admins",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="admin"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint("role IN ('admin', 'super_admin')", name="chk_admins_role"),
    )

    op.create_table(
        "vehicle_bookings",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("booking_number", sa.String(30), nullable=False, unique=True),
        sa.Column("customer_id", sa.String(36), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("vehicle_id", sa.String(36), sa.ForeignKey("vehicles.id"), nullable=False),
        sa.Column("pickup_location_id", sa.String(36), sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("dropoff_location_id", sa.String(36), sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("pickup_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("dropoff_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("number_of_days", sa.Integer, nullable=False),
        _money("price_per_day"),
        _money("subtotal"),
        _money("tax"),
        _money("total_amount"),
        sa.Column("payment_method", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("special_requests", sa.Text),
        sa.Column("admin_notes", sa.Text),
        sa.Column("confirmed_at", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.CheckConstraint(BOOKING_STATUS_CHECK, name="chk_vehicle_bookings_status"),
        sa.CheckConstraint("dropoff_date > pickup_date", name="chk_vehicle_bookings_dates"),
    )
    op.create_index(
        "idx_vehicle_bookings_vehicle_dates", "vehicle_bookings", ["vehicle_id", "pickup_date", "dropoff_date"]
    )
    op.create_index("idx_vehicle_bookings_status", "vehicle_bookings", ["status"])

    op.create_table(
        "taxi_bookings",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("booking_number", sa.String(30), nullable=False, unique=True),
        sa.Column("customer_id", sa.String(36), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("category_id", sa.String(36), sa.ForeignKey("vehicle_categories.id"), nullable=False),
        sa.Column("pickup_location_id", sa.String(36), sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("dropoff_location_id", sa.String(36), sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("pickup_address", sa.Text, nullable=False),
        sa.Column("pickup_lat", sa.Float, nullable=False),
        sa.Column("pickup_lng", sa.Float, nullable=False),
        sa.Column("dropoff_address", sa.Text, nullable=False),
        sa.Column("dropoff_lat", sa.Float, nullable=False),
        sa.Column("dropoff_lng", sa.Float, nullable=False),
        sa.Column("pickup_date_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("passengers", sa.Integer, nullable=False),
        sa.Column("distance", sa.Float, nullable=False),
        sa.Column("duration", sa.Float),
        _money("base_price"),
        _money("price_per_km"),
        _money("calculated_price"),
        _money("tax"),
        _money("total_amount"),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("special_requests", sa.Text),
        sa.Column("admin_notes", sa.Text),
        sa.Column("confirmed_at", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.CheckConstraint(BOOKING_STATUS_CHECK, name="chk_taxi_bookings_status"),
        sa.CheckConstraint("passengers > 0", name="chk_taxi_bookings_passengers"),
    )
    op.create_index("idx_taxi_bookings_status", "taxi_bookings", ["status"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_taxi_bookings_status", table_name="taxi_bookings")
    op.drop_table("taxi_bookings")
    op.drop_index("idx_vehicle_bookings_status", table_name="vehicle_bookings")
    op.drop_index("idx_vehicle_bookings_vehicle_dates", table_name="vehicle_bookings")
    op.drop_table("vehicle_bookings")
    op.drop_table("admins")
    op.drop_table("customers")
    op.drop_index("idx_vehicles_location_status", table_name="vehicles")
    op.drop_table("vehicles")
    op.drop_table("vehicle_categories")
    op.drop_index("idx_locations_city", table_name="locations")
    op.drop_table("locations")
