# Settings package
from agrimarket.settings.app_settings import (
    AppSettings,
    DatabaseSettings,
    OrderSettings,
    get_app_settings,
)

__all__ = ["AppSettings", "DatabaseSettings", "OrderSettings", "get_app_settings"]
