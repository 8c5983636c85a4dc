"""
Business services for the transport backend.

- pricing.py: rental and taxi price arithmetic
- booking_number.py: booking reference generation
- booking.py: customer resolution, availability, booking creation
- routing.py: straight-line route estimates
- dashboard.py: admin dashboard aggregates
- seed.py / seed_data.py: reference data population
- migration.py: Alembic upgrade runner
"""

__all__: list[str] = []
