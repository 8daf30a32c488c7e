"""Weather forecast record returned by the forecast service."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

SUMMARIES: tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)


class WeatherForecast(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    date_formatted: str = Field(
        validation_alias=AliasChoices("dateFormatted", "date", "date_formatted"),
    )
    temperature_c: int = Field(
        validation_alias=AliasChoices("temperatureC", "tempC", "temperature_c"),
    )
    summary: str | None = Field(
        default=None,
        description="One of the service's summary words.",
        examples=list(SUMMARIES),
    )

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)
