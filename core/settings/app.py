# core/settings/app.py
from functools import lru_cache

from core.settings.sections.database import DatabaseSettings
from core.settings.sections.orders import OrderSettings


class AppSettings:
    """
    Central application settings aggregator.
    Settings are loaded lazily inside __init__
    to prevent eager evaluation at import time.
    """

    def __init__(self):
        self.database = DatabaseSettings()
        self.orders = OrderSettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
