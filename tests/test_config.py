"""Tests for environment-driven settings."""

from sqlalchemy.engine import make_url

from biztime.config import DEFAULT_DATABASE_URL, get_cors_origins, get_database_url


def test_database_url_from_environment(monkeypatch):
    """Test that DATABASE_URL is used as-is."""
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/other")
    monkeypatch.setenv("BIZTIME_ENV", "test")
    assert get_database_url() == "postgresql://u:p@db:5432/other"


def test_database_url_default(monkeypatch):
    """Test the default database URL."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("BIZTIME_ENV", raising=False)
    assert get_database_url() == DEFAULT_DATABASE_URL


def test_default_database_url_names_driver():
    """Test that the default URL pins the psycopg2 driver."""
    assert make_url(DEFAULT_DATABASE_URL).get_driver_name() == "psycopg2"


def test_database_url_test_environment(monkeypatch):
    """Test that the test environment switches to the _test database."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("BIZTIME_ENV", "test")
    assert get_database_url() == "postgresql+psycopg2:///biztime_test"


def test_cors_origins(monkeypatch):
    """Test parsing of comma-separated CORS origins."""
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    assert get_cors_origins() == ["http://a.test", "http://b.test"]

    monkeypatch.delenv("CORS_ORIGINS")
    assert get_cors_origins() == ["http://localhost:3000"]
