"""Tests for the web client FastAPI backend."""

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from webclient.app import app, get_config, get_helper_factory
from webclient.config.schema import AzureAdOptions, WebClientConfig
from webclient.helpers.client_helper import HttpClientHelper
from webclient.helpers.errors import TokenAcquisitionError
from webclient.tests.fakes import FORECAST_URL, FailingTokenProvider, StaticTokenProvider

ROUTE = "/api/weather/weatherforecasts"


@pytest.fixture
def config(ad_options: AzureAdOptions) -> WebClientConfig:
    return WebClientConfig(azure_ad=ad_options)


@pytest.fixture
def client(config: WebClientConfig):
    app.dependency_overrides[get_config] = lambda: config
    app.dependency_overrides[get_helper_factory] = lambda: (
        lambda url, options: HttpClientHelper(url, options, token_provider=StaticTokenProvider())
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestWeatherForecasts:
    @respx.mock
    def test_relays_forecasts(self, client: TestClient):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(
                200,
                json=[
                    {"dateFormatted": "6/1/2026", "temperatureC": 20, "summary": "Mild"},
                    {"dateFormatted": "6/2/2026", "temperatureC": -3, "summary": "Chilly"},
                ],
            )
        )

        resp = client.get(ROUTE)
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 2
        assert data[0] == {
            "dateFormatted": "6/1/2026",
            "temperatureC": 20,
            "summary": "Mild",
            "temperatureF": 67,
        }
        assert route.calls[0].request.headers["authorization"] == "Bearer test-token-123"

    @respx.mock
    def test_no_content_returns_null(self, client: TestClient):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(204))

        resp = client.get(ROUTE)
        assert resp.status_code == 200
        assert resp.json() is None

    @respx.mock
    def test_upstream_error_becomes_400(self, client: TestClient):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(401))

        resp = client.get(ROUTE)
        assert resp.status_code == 400
        assert resp.json()["detail"] == f"Endpoint {FORECAST_URL} returned status code: 401"

    def test_token_failure_becomes_400(self, client: TestClient):
        app.dependency_overrides[get_helper_factory] = lambda: (
            lambda url, options: HttpClientHelper(
                url,
                options,
                token_provider=FailingTokenProvider(
                    TokenAcquisitionError("Failed to acquire access token: invalid_client")
                ),
            )
        )

        resp = client.get(ROUTE)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Failed to acquire access token: invalid_client"
