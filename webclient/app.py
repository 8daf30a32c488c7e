"""Web client backend: serves weather forecasts fetched from the protected API."""

import logging
import os
from collections.abc import Callable
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException

from webclient.config.loader import load_config
from webclient.config.schema import AzureAdOptions, WebClientConfig
from webclient.helpers.client_helper import HttpClientHelper
from webclient.models.forecast import WeatherForecast

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "WEBCLIENT_CONFIG"
DEFAULT_CONFIG = "configs/default.yaml"

HelperFactory = Callable[[str, AzureAdOptions], HttpClientHelper]

app = FastAPI(title="Weather Web Client", version="0.1.0")


@lru_cache(maxsize=1)
def get_config() -> WebClientConfig:
    return load_config(os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG))


def get_helper_factory() -> HelperFactory:
    return HttpClientHelper


@app.get(
    "/api/weather/weatherforecasts",
    response_model=list[WeatherForecast] | None,
    response_model_by_alias=True,
)
async def weather_forecasts(
    config: WebClientConfig = Depends(get_config),
    helper_factory: HelperFactory = Depends(get_helper_factory),
):
    """Call the forecast API with an app-only token and relay its records."""
    url = config.forecast_url
    try:
        # One helper, and so one token, per request
        http_client = helper_factory(url, config.azure_ad)
        return await http_client.get_item("", response_type=list[WeatherForecast])
    except Exception as e:
        logger.error("Forecast request to %s failed: %s", url, e)
        raise HTTPException(status_code=400, detail=str(e))
