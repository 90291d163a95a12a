from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from idr_converter.models.currency import get_currency_table


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic-settings rules (e.g., APP_NAME, DEBUG, DEFAULT_CURRENCY, LOG_JSON).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Basic app metadata
    app_name: str = "IDR Currency Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Initial selection of the converter screen and default target of /convert
    default_currency: str = "USD"

    # Logging
    log_json: bool = True

    def init_post_load(self) -> None:
        """Normalize and validate derived fields."""
        self.default_currency = self.default_currency.strip().upper()
        table = get_currency_table()
        if self.default_currency not in table:
            raise ValueError(
                f"Unsupported default_currency '{self.default_currency}'. Allowed: {table.codes()}"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
