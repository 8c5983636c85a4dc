#!/usr/bin/env python3
"""Seed the database with locations, taxi categories, demo vehicles and an admin.

Safe to re-run: existing records are left untouched. Exits 1 on any failure,
after rolling back everything written by this run.

Usage:
    python scripts/seed_db.py [path/to/seed.json]
"""

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add src to path for package imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from transport.config import get_config
from transport.db import Database
from transport.services.seed import run_seed
from transport.services.seed_data import DEFAULT_SEED_DATA, AdminSeed, load_seed_data

logger = logging.getLogger("seed")


def main(argv: list[str]) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    config = get_config()
    logger.info("Starting database seed...")

    try:
        if len(argv) > 1:
            data = load_seed_data(argv[1])
        else:
            data = DEFAULT_SEED_DATA.model_copy(update={"admin": AdminSeed(email=config.seed_admin_email)})

        with Database(config) as database, database.session() as session:
            summary = run_seed(session, data, admin_password=config.seed_admin_password)
    except Exception:
        logger.exception("Error seeding database")
        return 1

    logger.info(
        "Seed complete: %d locations, %d categories, %d vehicles, %d admin, %d customer",
        summary.locations.total,
        summary.categories.total,
        summary.vehicles.total,
        summary.admins.total,
        summary.customers.total,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
