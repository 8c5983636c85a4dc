from transport.db.schemas.admin import Admin
from transport.db.schemas.base import Base
from transport.db.schemas.booking import TaxiBooking, VehicleBooking
from transport.db.schemas.customer import Customer
from transport.db.schemas.location import Location
from transport.db.schemas.vehicle import Vehicle
from transport.db.schemas.vehicle_category import VehicleCategory

__all__ = ["Admin", "Base", "Customer", "Location", "TaxiBooking", "Vehicle", "VehicleBooking", "VehicleCategory"]
