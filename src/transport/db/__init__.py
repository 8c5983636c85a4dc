"""
Database ORM models and client for the transport backend.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from transport.db.database import Database
from transport.db.schemas import (
    Admin,
    Base,
    Customer,
    Location,
    TaxiBooking,
    Vehicle,
    VehicleBooking,
    VehicleCategory,
)

__all__ = [
    "Admin",
    "Base",
    "Customer",
    "Database",
    "Location",
    "TaxiBooking",
    "Vehicle",
    "VehicleBooking",
    "VehicleCategory",
]
