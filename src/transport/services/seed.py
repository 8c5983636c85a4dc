"""
One-shot population of reference and demo data.

Groups are written in order (locations → categories → vehicles → admin →
sample customer), each group as a single batch. Records that already exist
under their key are left untouched, so the routine can be re-run safely.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from transport.db.schemas import Admin, Base, Customer, Location, Vehicle, VehicleCategory
from transport.security import hash_password
from transport.services.seed_data import DEFAULT_SEED_DATA, SeedData

logger = logging.getLogger(__name__)


class GroupResult(BaseModel):
    created: int = 0
    existing: int = 0

    @property
    def total(self) -> int:
        return self.created + self.existing


class SeedSummary(BaseModel):
    locations: GroupResult
    categories: GroupResult
    vehicles: GroupResult
    admins: GroupResult
    customers: GroupResult


def _seed_group(
    session: Session,
    model: type[Base],
    key: str,
    rows: Sequence[dict[str, Any]],
) -> GroupResult:
    """Insert the rows whose ``key`` is not present yet, as one flush."""
    if not rows:
        return GroupResult()

    column = getattr(model, key)
    wanted = [row[key] for row in rows]
    present = set(session.scalars(select(column).where(column.in_(wanted))))

    new_objects = [model(**row) for row in rows if row[key] not in present]
    session.add_all(new_objects)
    session.flush()

    return GroupResult(created=len(new_objects), existing=len(rows) - len(new_objects))


def run_seed(
    session: Session,
    data: SeedData = DEFAULT_SEED_DATA,
    admin_password: str = "admin123",
    hasher: Callable[[str], str] = hash_password,
) -> SeedSummary:
    """Seed all groups inside the caller's transaction."""
    logger.info("Creating locations...")
    locations = _seed_group(session, Location, "id", [loc.model_dump() for loc in data.locations])
    logger.info("Locations: %d created, %d already present", locations.created, locations.existing)

    logger.info("Creating vehicle categories...")
    categories = _seed_group(session, VehicleCategory, "name", [cat.model_dump() for cat in data.categories])
    logger.info("Vehicle categories: %d created, %d already present", categories.created, categories.existing)

    logger.info("Creating sample vehicles...")
    vehicles = _seed_group(session, Vehicle, "registration_no", [v.model_dump() for v in data.vehicles])
    logger.info("Vehicles: %d created, %d already present", vehicles.created, vehicles.existing)

    admins = GroupResult()
    if data.admin is not None:
        logger.info("Creating admin user...")
        admin_row = {**data.admin.model_dump(), "password_hash": hasher(admin_password), "is_active": True}
        admins = _seed_group(session, Admin, "email", [admin_row])
        if admins.created:
            logger.info("Created admin user %s", data.admin.email)
        else:
            logger.info("Admin user %s already exists, left unchanged", data.admin.email)

    customers = GroupResult()
    if data.customer is not None:
        logger.info("Creating sample customer...")
        customers = _seed_group(session, Customer, "email", [data.customer.model_dump()])

    logger.info("Database seeded successfully")
    return SeedSummary(
        locations=locations,
        categories=categories,
        vehicles=vehicles,
        admins=admins,
        customers=customers,
    )
