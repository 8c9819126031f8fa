"""Configuration package."""

from bizinvoice.config.settings import (
    CURRENCY_SYMBOLS,
    AppSettings,
    DisplaySettings,
    Settings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "AppSettings",
    "DisplaySettings",
    "Settings",
    "StorageSettings",
    "get_settings",
    "validate_all_settings",
]
