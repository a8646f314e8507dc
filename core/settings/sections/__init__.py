from core.settings.sections.database import DatabaseSettings
from core.settings.sections.orders import OrderSettings

__all__ = ["DatabaseSettings", "OrderSettings"]
