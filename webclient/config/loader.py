"""YAML config loader with environment overrides and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from webclient.config.schema import WebClientConfig

CLIENT_SECRET_ENV = "WEBCLIENT_CLIENT_SECRET"


def load_config(path: str | Path) -> WebClientConfig:
    """Load and validate config from a YAML file.

    If the YAML carries no client secret, falls back to WEBCLIENT_CLIENT_SECRET.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    azure_ad = raw.setdefault("azure_ad", {}) or {}
    raw["azure_ad"] = azure_ad
    if not azure_ad.get("client_secret"):
        secret = os.environ.get(CLIENT_SECRET_ENV, "")
        if secret:
            azure_ad["client_secret"] = secret

    return WebClientConfig(**raw)


def get_config_value(config: WebClientConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'azure_ad.tenant'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
