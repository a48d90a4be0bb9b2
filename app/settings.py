from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from geo.dms_format import DEFAULT_FORMAT, FormatOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    dms_format: str = Field(default=DEFAULT_FORMAT, validation_alias="DMS_FORMAT")
    decimal_places: int = Field(
        default=5, ge=0, validation_alias="DMS_DECIMAL_PLACES"
    )
    lat_lon_separator: str = Field(
        default=" ", validation_alias="DMS_LATLON_SEPARATOR"
    )

    def format_options(self) -> FormatOptions:
        return FormatOptions(
            decimal_places=self.decimal_places,
            lat_lon_separator=self.lat_lon_separator,
        )
