"""Behaviour when the database cannot be reached or queried."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from portfolio_showcase.api.main import app
from portfolio_showcase.services.portfolio import PortfolioQueryError, list_portfolio_items

_BAD_PORT_MESSAGE = "POSTGRES_PORT must be an integer, got '5432x'"


@pytest.mark.usefixtures("unreachable_db")
def test_endpoint_returns_500_with_message_when_connection_fails() -> None:
    client = TestClient(app)

    response = client.get("/api/portfolio")

    assert response.status_code == 500
    body = response.json()
    assert set(body) == {"message"}
    assert body["message"].strip()
    assert "unable to open database file" in body["message"]


@pytest.mark.usefixtures("unreachable_db")
def test_service_raises_query_error_when_connection_fails() -> None:
    with pytest.raises(PortfolioQueryError) as excinfo:
        list_portfolio_items()

    assert excinfo.value.message
    assert excinfo.value.__cause__ is not None


@pytest.mark.usefixtures("unreachable_db")
def test_startup_survives_unreachable_database() -> None:
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        assert client.get("/api/portfolio").status_code == 500


@pytest.mark.usefixtures("blank_db")
def test_missing_table_is_reported_as_500() -> None:
    response = TestClient(app).get("/api/portfolio")

    assert response.status_code == 500
    assert "portfolio_items" in response.json()["message"]


def test_query_error_falls_back_to_generic_message() -> None:
    assert PortfolioQueryError("").message == "Failed to query portfolio items"


@pytest.mark.usefixtures("malformed_port")
def test_malformed_port_is_reported_as_json_500() -> None:
    response = TestClient(app).get("/api/portfolio")

    assert response.status_code == 500
    assert response.json() == {"message": _BAD_PORT_MESSAGE}


@pytest.mark.usefixtures("malformed_port")
def test_service_translates_malformed_port() -> None:
    with pytest.raises(PortfolioQueryError, match="POSTGRES_PORT must be an integer"):
        list_portfolio_items()


@pytest.mark.usefixtures("malformed_port")
def test_startup_survives_malformed_port() -> None:
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        response = client.get("/api/portfolio")

    assert response.status_code == 500
    assert response.json()["message"] == _BAD_PORT_MESSAGE
