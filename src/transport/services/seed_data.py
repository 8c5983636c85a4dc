"""
Reference and demo records for the seed routine.

Records are plain pydantic models so a different set can be loaded from a
JSON file (``load_seed_data``) for fixtures or other deployments. Each group
names the field it is upserted on.
"""

from datetime import date
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from transport.models.enums import VehicleStatus


class LocationSeed(BaseModel):
    id: str
    name: str
    city: str
    address: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    is_active: bool = True


class CategorySeed(BaseModel):
    name: str
    description: str | None = None
    seats: int = Field(..., gt=0)
    base_price: float = Field(..., ge=0)
    price_per_km: float = Field(..., ge=0)
    image: str | None = None
    is_active: bool = True


class VehicleSeed(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str
    brand: str
    model: str
    year: int
    registration_no: str
    color: str | None = None
    seats: int = Field(..., gt=0)
    transmission: str
    fuel_type: str
    price_per_day: float = Field(..., gt=0)
    images: list[str] = []
    features: list[str] = []
    description: str | None = None
    status: VehicleStatus = VehicleStatus.AVAILABLE
    location_id: str
    mileage: int | None = None


class AdminSeed(BaseModel):
    email: str
    first_name: str = "Admin"
    last_name: str = "User"
    role: str = Field(default="super_admin", pattern="^(admin|super_admin)$")


class CustomerSeed(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str | None = None
    city: str | None = None
    country: str = "Kenya"
    driving_license: str | None = None
    license_expiry: date | None = None


class SeedData(BaseModel):
    locations: list[LocationSeed]  # keyed by id
    categories: list[CategorySeed]  # keyed by name
    vehicles: list[VehicleSeed]  # keyed by registration_no
    admin: AdminSeed | None = None  # keyed by email
    customer: CustomerSeed | None = None  # keyed by email


def load_seed_data(path: str | Path) -> SeedData:
    return SeedData.model_validate_json(Path(path).read_text(encoding="utf-8"))


LOCATIONS = [
    LocationSeed(
        id="nairobi-loc",
        name="Nairobi",
        city="Nairobi",
        address="Nairobi CBD, Kenya",
        latitude=-1.286389,
        longitude=36.817223,
    ),
    LocationSeed(
        id="kisumu-loc",
        name="Kisumu",
        city="Kisumu",
        address="Kisumu City Center, Kenya",
        latitude=-0.091702,
        longitude=34.767956,
    ),
    LocationSeed(
        id="nakuru-loc",
        name="Nakuru",
        city="Nakuru",
        address="Nakuru Town, Kenya",
        latitude=-0.303099,
        longitude=36.080025,
    ),
    LocationSeed(
        id="mombasa-loc",
        name="Mombasa",
        city="Mombasa",
        address="Mombasa Island, Kenya",
        latitude=-4.043477,
        longitude=39.668206,
    ),
    LocationSeed(
        id="eldoret-loc",
        name="Eldoret",
        city="Eldoret",
        address="Eldoret Town, Kenya",
        latitude=0.514277,
        longitude=35.269779,
    ),
]

CATEGORIES = [
    CategorySeed(
        name="Sedan",
        description="Comfortable sedan for up to 4 passengers",
        seats=4,
        base_price=2000,
        price_per_km=50,
        image="/images/categories/sedan.jpg",
    ),
    CategorySeed(
        name="SUV",
        description="Spacious SUV for up to 6 passengers",
        seats=6,
        base_price=3500,
        price_per_km=70,
        image="/images/categories/suv.jpg",
    ),
    CategorySeed(
        name="Van",
        description="Large van for up to 12 passengers",
        seats=12,
        base_price=5000,
        price_per_km=90,
        image="/images/categories/van.jpg",
    ),
    CategorySeed(
        name="Executive",
        description="Luxury executive car for up to 3 passengers",
        seats=3,
        base_price=5000,
        price_per_km=100,
        image="/images/categories/executive.jpg",
    ),
]

VEHICLES = [
    VehicleSeed(
        name="Toyota Corolla 2022",
        brand="Toyota",
        model="Corolla",
        year=2022,
        registration_no="KCA 123A",
        color="Silver",
        seats=5,
        transmission="Automatic",
        fuel_type="Petrol",
        price_per_day=3500,
        images=["/images/vehicles/corolla-1.jpg", "/images/vehicles/corolla-2.jpg"],
        features=["AC", "GPS", "Bluetooth", "USB Charging"],
        description="Reliable and fuel-efficient sedan, perfect for city driving.",
        location_id="nairobi-loc",
        mileage=45000,
    ),
    VehicleSeed(
        name="Honda CRV 2023",
        brand="Honda",
        model="CRV",
        year=2023,
        registration_no="KCB 456B",
        color="Black",
        seats=7,
        transmission="Automatic",
        fuel_type="Petrol",
        price_per_day=5500,
        images=["/images/vehicles/crv-1.jpg"],
        features=["AC", "GPS", "Bluetooth", "Leather Seats", "Sunroof"],
        description="Spacious SUV ideal for family trips and road adventures.",
        location_id="nairobi-loc",
        mileage=12000,
    ),
    VehicleSeed(
        name="Nissan X-Trail 2021",
        brand="Nissan",
        model="X-Trail",
        year=2021,
        registration_no="KCC 789C",
        color="White",
        seats=7,
        transmission="Automatic",
        fuel_type="Diesel",
        price_per_day=4800,
        images=["/images/vehicles/xtrail-1.jpg"],
        features=["AC", "GPS", "Bluetooth", "4WD"],
        description="Powerful SUV with 4WD capability for any terrain.",
        location_id="kisumu-loc",
        mileage=68000,
    ),
    VehicleSeed(
        name="Mazda Demio 2020",
        brand="Mazda",
        model="Demio",
        year=2020,
        registration_no="KCD 234D",
        color="Blue",
        seats=5,
        transmission="Manual",
        fuel_type="Petrol",
        price_per_day=2800,
        images=["/images/vehicles/demio-1.jpg"],
        features=["AC", "Bluetooth", "USB Charging"],
        description="Compact and economical car, great for budget travelers.",
        location_id="mombasa-loc",
        mileage=92000,
    ),
    VehicleSeed(
        name="Toyota Prado 2023",
        brand="Toyota",
        model="Land Cruiser Prado",
        year=2023,
        registration_no="KCE 567E",
        color="Pearl White",
        seats=7,
        transmission="Automatic",
        fuel_type="Diesel",
        price_per_day=8500,
        images=["/images/vehicles/prado-1.jpg", "/images/vehicles/prado-2.jpg"],
        features=["AC", "GPS", "Bluetooth", "Leather Seats", "4WD", "Sunroof", "Cruise Control"],
        description="Premium SUV with luxury features and excellent off-road capability.",
        location_id="nairobi-loc",
        mileage=8000,
    ),
]

SAMPLE_CUSTOMER = CustomerSeed(
    first_name="John",
    last_name="Doe",
    email="john.doe@example.com",
    phone="+254712345678",
    address="123 Sample Street",
    city="Nairobi",
    driving_license="DL123456789",
    license_expiry=date(2026, 12, 31),
)

DEFAULT_SEED_DATA = SeedData(
    locations=LOCATIONS,
    categories=CATEGORIES,
    vehicles=VEHICLES,
    admin=AdminSeed(email="admin@transport.com"),
    customer=SAMPLE_CUSTOMER,
)
