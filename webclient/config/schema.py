"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, SecretStr

DEFAULT_INSTANCE = "https://login.microsoftonline.com/{0}"


class AzureAdOptions(BaseModel):
    """Identity provider settings for the client-credentials flow.

    ``instance`` is an authority template; ``{0}`` or ``{tenant}`` is
    replaced with ``tenant``.
    """

    model_config = {"extra": "forbid", "frozen": True}

    instance: str = DEFAULT_INSTANCE
    tenant: str = "common"
    audience: str = ""
    client_id: str = ""
    client_secret: SecretStr = SecretStr("")
    web_api_base_address: str = "http://localhost:5000/api/v1"

    # Transport trusts environment proxies and .netrc credentials
    use_ambient_credentials: bool = True
    # The existing service only accepts POST on its "put" operations
    legacy_put_as_post: bool = True
    timeout: float | None = Field(default=None, gt=0.0)

    @property
    def authority(self) -> str:
        return self.instance.format(self.tenant, tenant=self.tenant)

    @property
    def scopes(self) -> list[str]:
        return [f"{self.audience.rstrip('/')}/.default"]


class WebClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    azure_ad: AzureAdOptions = AzureAdOptions()
    forecast_path: str = "/weather/forecast"

    @property
    def forecast_url(self) -> str:
        return f"{self.azure_ad.web_api_base_address.rstrip('/')}{self.forecast_path}"
