"""Tests for industry API endpoints."""

from unittest.mock import Mock

from fastapi.testclient import TestClient

from biztime.db import UniqueViolation
from biztime.models import Industry, IndustryCompanies, IndustryCreate


class TestIndustriesEndpoints:
    """Test industry endpoints."""

    def test_list_industries(self, client: TestClient, mock_db: Mock):
        """Test listing industries, including one without companies."""
        mock_db.industries.list_industries.return_value = [
            IndustryCompanies(code="acct", companies=[]),
            IndustryCompanies(code="tech", companies=["apple", "ibm"]),
        ]

        response = client.get("/industries")

        assert response.status_code == 200
        assert response.json() == {
            "industries": [
                {"code": "acct", "companies": []},
                {"code": "tech", "companies": ["apple", "ibm"]},
            ]
        }

    def test_list_industries_empty(self, client: TestClient, mock_db: Mock):
        """Test listing industries when there are none."""
        mock_db.industries.list_industries.return_value = []

        response = client.get("/industries")

        assert response.status_code == 200
        assert response.json() == {"industries": []}

    def test_get_industry(self, client: TestClient, mock_db: Mock):
        """Test retrieving a single industry."""
        mock_db.industries.get_industry.return_value = IndustryCompanies(
            code="tech", companies=["ibm"]
        )

        response = client.get("/industries/tech")

        assert response.status_code == 200
        assert response.json() == {"industry": {"code": "tech", "companies": ["ibm"]}}
        mock_db.industries.get_industry.assert_called_once_with("tech")

    def test_get_industry_not_found(self, client: TestClient, mock_db: Mock):
        """Test retrieving a missing industry."""
        mock_db.industries.get_industry.return_value = None

        response = client.get("/industries/nope")

        assert response.status_code == 404
        assert "nope" in response.json()["detail"]

    def test_create_industry(self, client: TestClient, mock_db: Mock):
        """Test creating an industry."""
        mock_db.industries.insert_industry.return_value = Industry(
            code="real-estate", industry="Real Estate"
        )

        response = client.post(
            "/industries", json={"code": "Real Estate", "industry": "Real Estate"}
        )

        assert response.status_code == 201
        assert response.json() == {
            "industry": {"code": "real-estate", "industry": "Real Estate"}
        }
        mock_db.industries.insert_industry.assert_called_once_with(
            IndustryCreate(code="Real Estate", industry="Real Estate")
        )

    def test_create_industry_duplicate(self, client: TestClient, mock_db: Mock):
        """Test that a duplicate code surfaces as a server error."""
        mock_db.industries.insert_industry.side_effect = UniqueViolation(
            "duplicate key", "industries_pkey"
        )

        response = client.post(
            "/industries", json={"code": "tech", "industry": "Technology"}
        )

        assert response.status_code == 500

    def test_create_industry_code_without_slug(
        self, client: TestClient, mock_db: Mock
    ):
        """Test that a code with no slug characters is a client error."""
        mock_db.industries.insert_industry.side_effect = ValueError(
            "Code '---' has no letters or digits to build a slug from"
        )

        response = client.post("/industries", json={"code": "---", "industry": "X"})

        assert response.status_code == 400
        assert "---" in response.json()["detail"]

    def test_delete_industry(self, client: TestClient, mock_db: Mock):
        """Test deleting an industry."""
        mock_db.industries.delete_industry.return_value = True

        response = client.delete("/industries/tech")

        assert response.status_code == 200
        assert response.json() == {"status": "deleted"}

    def test_delete_industry_not_found(self, client: TestClient, mock_db: Mock):
        """Test deleting a missing industry."""
        mock_db.industries.delete_industry.return_value = False

        response = client.delete("/industries/nope")

        assert response.status_code == 404
