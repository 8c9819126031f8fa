"""
Configuration Management for BizInvoice

Uses pydantic-settings for type-safe configuration from environment variables.

All configuration is centralized here: where the invoice list is kept,
how amounts are displayed, and how much gets logged. Every setting has a
default, so the app runs with no configuration at all.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Symbols for the currencies we know how to display.
# Anything else falls back to the ISO code followed by a space.
CURRENCY_SYMBOLS = {
    "USD": "$",
    "PHP": "₱",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
}


class StorageSettings(BaseSettings):
    """Local key-value storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BIZINVOICE_STORAGE_",
        extra="ignore"
    )

    directory: Path = Field(
        default=Path(".bizinvoice"),
        description="Directory holding one JSON file per storage key"
    )
    key: str = Field(
        default="bizinvoice_invoices",
        min_length=1,
        pattern=r"^[A-Za-z0-9_.-]+$",
        description="Storage key the invoice list is persisted under"
    )


class DisplaySettings(BaseSettings):
    """
    Currency and locale used when rendering amounts.

    This is display configuration only. Stored prices and totals
    stay plain numbers whatever currency is shown.
    """

    model_config = SettingsConfigDict(
        env_prefix="BIZINVOICE_DISPLAY_",
        extra="ignore"
    )

    locale: str = Field(
        default="en-US",
        description="Locale label for the UI"
    )
    currency_code: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="ISO 4217 currency code"
    )
    currency_symbol: Optional[str] = Field(
        default=None,
        description="Override for the currency symbol"
    )
    fraction_digits: int = Field(
        default=2,
        ge=0,
        le=4,
        description="Digits shown after the decimal point"
    )

    @field_validator('currency_code')
    @classmethod
    def normalize_currency_code(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def symbol(self) -> str:
        """Get the symbol to prefix amounts with."""
        if self.currency_symbol:
            return self.currency_symbol
        return CURRENCY_SYMBOLS.get(self.currency_code, f"{self.currency_code} ")


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Standard library log level name"
    )

    # How many audit events to keep around for the activity panel
    audit_history_size: int = Field(
        default=200,
        ge=0,
        le=10000,
        description="Number of recent audit events kept in memory"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def display(self) -> DisplaySettings:
        return DisplaySettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    "<name>_error" entry for each group that failed to load.
    """
    results = {}

    settings = get_settings()

    for name in ("storage", "display", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
