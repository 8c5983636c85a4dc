"""Shared test fixtures for the transport backend."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def _hash_for_tests(password: str) -> str:
    return f"hashed:{password}"


@pytest.fixture(autouse=True)
def _clear_config_cache():
    from transport.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def database():
    """In-memory SQLite database with the full schema created."""
    from transport.config import Config
    from transport.db import Base, Database

    config = Config(aws_region="us-east-1", database_url="sqlite+pysqlite:///:memory:", environment="test")
    db = Database(config)
    db.connect()
    Base.metadata.create_all(db.engine)
    yield db
    db.disconnect()


@pytest.fixture
def session(database):
    with database.session() as session:
        yield session


@pytest.fixture
def seeded_session(session):
    """Session holding the default reference data."""
    from transport.services.seed import run_seed

    run_seed(session, hasher=_hash_for_tests)
    return session


@pytest.fixture
def seeded_database(database):
    """Database with the default reference data committed, for handler tests."""
    from transport.services.seed import run_seed

    with database.session() as session:
        run_seed(session, hasher=_hash_for_tests)
    return database


# PostgreSQL fixtures
@pytest.fixture
def pg_database():
    """Database client against DATABASE_URL for integration tests."""
    from transport.config import get_config
    from transport.db import Database

    if not os.environ.get("DATABASE_URL"):
        pytest.skip("DATABASE_URL not set")

    with Database(get_config()) as db:
        yield db
