"""
Rental and taxi price calculation.

Every monetary output is rounded on its own to 2 decimal places
(ROUND_HALF_UP). ``total_amount`` is rounded from the unrounded
subtotal + tax, so it can differ by a cent from the sum of the rounded
subtotal and tax. Downstream reconciliation relies on this.
"""

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from transport.models.base import assume_utc
from transport.models.pricing import TaxiPriceBreakdown, TaxiPriceCalculation, VehiclePriceBreakdown

DEFAULT_TAX_RATE = 0.16  # Kenyan VAT

_CENT = Decimal("0.01")
_SECONDS_PER_DAY = 86400


class TaxiCategory(Protocol):
    id: str
    name: str
    seats: int
    base_price: float
    price_per_km: float


def round_money(value: float | Decimal) -> float:
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def calculate_number_of_days(start: datetime, end: datetime) -> int:
    return math.ceil(abs((end - start).total_seconds()) / _SECONDS_PER_DAY)


def is_date_range_valid(start: datetime, end: datetime, now: datetime | None = None) -> bool:
    """True when the range is ordered and does not start in the past.

    Naive datetimes are taken to be UTC.
    """
    start, end = assume_utc(start), assume_utc(end)
    now = assume_utc(now) if now is not None else datetime.now(timezone.utc)
    return start < end and start >= now


def calculate_vehicle_booking_price(
    price_per_day: float,
    number_of_days: int,
    tax_rate: float = DEFAULT_TAX_RATE,
) -> VehiclePriceBreakdown:
    subtotal = price_per_day * number_of_days
    tax = subtotal * tax_rate
    total_amount = subtotal + tax

    return VehiclePriceBreakdown(
        subtotal=round_money(subtotal),
        tax=round_money(tax),
        total_amount=round_money(total_amount),
    )


def calculate_taxi_price(
    base_price: float,
    price_per_km: float,
    distance: float,
    tax_rate: float = DEFAULT_TAX_RATE,
) -> TaxiPriceBreakdown:
    calculated_price = base_price + price_per_km * distance
    tax = calculated_price * tax_rate
    total_amount = calculated_price + tax

    return TaxiPriceBreakdown(
        calculated_price=round_money(calculated_price),
        tax=round_money(tax),
        total_amount=round_money(total_amount),
    )


def quote_taxi_category(
    category: TaxiCategory,
    distance: float,
    tax_rate: float = DEFAULT_TAX_RATE,
) -> TaxiPriceCalculation:
    base_price = float(category.base_price)
    price_per_km = float(category.price_per_km)
    breakdown = calculate_taxi_price(base_price, price_per_km, distance, tax_rate)
    return TaxiPriceCalculation(
        category_id=category.id,
        category_name=category.name,
        seats=category.seats,
        base_price=base_price,
        price_per_km=price_per_km,
        distance=distance,
        **breakdown.model_dump(),
    )
