import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass
class Settings:
    database_url: str = "sqlite:////tmp/storefront.db"
    notification_ttl: float = 3.0
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings(
        database_url=os.getenv("DATABASE_URL", Settings.database_url),
        notification_ttl=float(os.getenv("NOTIFICATION_TTL", Settings.notification_ttl)),
        log_level=os.getenv("LOG_LEVEL", Settings.log_level),
    )
