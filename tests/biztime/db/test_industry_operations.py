"""Tests for industry database operations."""

import pytest

from biztime import CompanyCreate, IndustryCreate
from biztime.db import UniqueViolation


class TestIndustryOperations:
    """Test industry database operations."""

    def test_insert_industry_slugifies_code(self, db):
        industry = db.industries.insert_industry(
            IndustryCreate(code="Real Estate", industry="Real Estate")
        )

        assert industry.code == "real-estate"
        assert industry.industry == "Real Estate"

    def test_insert_industry_rejects_empty_slug(self, db):
        with pytest.raises(ValueError):
            db.industries.insert_industry(IndustryCreate(code="---", industry="X"))

        assert db.industries.list_industries() == []

    def test_insert_industry_duplicate(self, seeded_db):
        with pytest.raises(UniqueViolation):
            seeded_db.industries.insert_industry(
                IndustryCreate(code="tech", industry="Tech again")
            )

    def test_list_industries_includes_empty(self, seeded_db):
        """Test that every industry is listed with its full company set."""
        seeded_db.companies.insert_company(CompanyCreate(code="apple", name="Apple"))
        seeded_db.companies.add_industry("apple", "tech")

        industries = seeded_db.industries.list_industries()

        by_code = {i.code: sorted(i.companies) for i in industries}
        assert by_code == {"acct": [], "tech": ["apple", "ibm"]}

    def test_list_industries_empty(self, db):
        assert db.industries.list_industries() == []

    def test_get_industry(self, seeded_db):
        industry = seeded_db.industries.get_industry("tech")

        assert industry.code == "tech"
        assert industry.companies == ["ibm"]

    def test_get_industry_not_found(self, seeded_db):
        assert seeded_db.industries.get_industry("nope") is None

    def test_delete_industry_cascades(self, seeded_db):
        assert seeded_db.industries.delete_industry("tech") is True

        assert seeded_db.industries.get_industry("tech") is None
        assert seeded_db.companies.get_company("ibm").industries == []

    def test_delete_industry_not_found(self, seeded_db):
        assert seeded_db.industries.delete_industry("nope") is False
        assert len(seeded_db.industries.list_industries()) == 2
