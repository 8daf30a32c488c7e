"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from webclient.config.schema import AzureAdOptions
from webclient.tests.fakes import API_BASE, StaticTokenProvider


@pytest.fixture
def ad_options() -> AzureAdOptions:
    return AzureAdOptions(
        instance="https://login.test.example.com/{0}",
        tenant="contoso",
        audience="api://weather-web-api",
        client_id="client-abc",
        client_secret="s3cr3t",
        web_api_base_address=API_BASE,
    )


@pytest.fixture
def token_provider() -> StaticTokenProvider:
    return StaticTokenProvider()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "azure_ad": {
            "tenant": "contoso",
            "audience": "api://weather-web-api",
            "client_id": "client-abc",
            "web_api_base_address": API_BASE,
        },
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
