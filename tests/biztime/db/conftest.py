"""Pytest configuration for database tests."""

import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError

from api.common import get_biztime_db
from biztime import (
    BizTimeDatabase,
    CompanyCreate,
    IndustryCreate,
    InvoiceCreate,
)

TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL", "postgresql+psycopg2://localhost:5432/biztime_test"
)


def create_test_database_if_not_exists(test_db_url: str) -> None:
    """Create test database if it doesn't exist."""
    url = make_url(test_db_url)

    try:
        # Try to connect to the test database first
        test_engine = create_engine(url)
        with test_engine.connect():
            pass
        test_engine.dispose()
        return
    except OperationalError:
        pass

    # Connect to the default postgres database to create the test database
    default_engine = create_engine(
        url.set(database="postgres"), isolation_level="AUTOCOMMIT"
    )
    try:
        with default_engine.connect() as conn:
            conn.execute(text(f'CREATE DATABASE "{url.database}"'))
    finally:
        default_engine.dispose()


@pytest.fixture(scope="session")
def test_db_url() -> str:
    """Test database URL."""
    return TEST_DATABASE_URL


@pytest.fixture(scope="session", autouse=True)
def setup_test_database(test_db_url: str):
    """Setup test database before running tests."""
    try:
        create_test_database_if_not_exists(test_db_url)
    except OperationalError as e:
        pytest.skip(f"PostgreSQL is not available: {e}")


@pytest.fixture(scope="session")
def test_engine(setup_test_database, test_db_url: str) -> Engine:
    """Test database engine with the schema migrated to head."""
    from alembic import command
    from alembic.config import Config

    # Get the project root directory (where alembic.ini is located)
    project_root = Path(__file__).parent.parent.parent.parent
    alembic_cfg = Config(str(project_root / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(project_root / "migrations"))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)

    # Override DATABASE_URL so Alembic's env.py uses the test database
    original_database_url = os.environ.get("DATABASE_URL")
    os.environ["DATABASE_URL"] = test_db_url
    try:
        command.upgrade(alembic_cfg, "head")
    finally:
        if original_database_url is not None:
            os.environ["DATABASE_URL"] = original_database_url
        else:
            os.environ.pop("DATABASE_URL", None)

    engine = create_engine(test_db_url)
    yield engine
    engine.dispose()


@pytest.fixture(autouse=True)
def clean_tables(test_engine: Engine):
    """Automatically clean tables before each test."""
    with test_engine.begin() as conn:
        conn.execute(
            text(
                "TRUNCATE TABLE companies_industries, invoices, industries, companies "
                "RESTART IDENTITY CASCADE"
            )
        )


@pytest.fixture(scope="function")
def db(test_engine: Engine, test_db_url: str) -> BizTimeDatabase:
    """Test database instance."""
    database = BizTimeDatabase(test_db_url)
    yield database
    database.close()


@pytest.fixture(scope="function")
def seeded_db(db: BizTimeDatabase) -> BizTimeDatabase:
    """IBM with one invoice, tagged as Technology; Accounting unassigned."""
    db.companies.insert_company(
        CompanyCreate(code="ibm", name="IBM", description="Big Blue")
    )
    db.invoices.insert_invoice(InvoiceCreate(comp_code="ibm", amt=999))
    db.industries.insert_industry(IndustryCreate(code="tech", industry="Technology"))
    db.industries.insert_industry(IndustryCreate(code="acct", industry="Accounting"))
    db.companies.add_industry("ibm", "tech")
    return db


@pytest.fixture(scope="function")
def api_client(seeded_db: BizTimeDatabase) -> TestClient:
    """Test client backed by the seeded test database."""
    from app import app

    app.dependency_overrides[get_biztime_db] = lambda: seeded_db
    yield TestClient(app)
    app.dependency_overrides.clear()
