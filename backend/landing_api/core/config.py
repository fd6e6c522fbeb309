import logging
import sys
from functools import lru_cache
from typing import List

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# Unset, or set to an empty string
MISSING_ERROR_TYPES = {"missing", "string_too_short"}


class Settings(BaseSettings):
    # API Configuration
    app_name: str = "Landing Page API"
    version: str = "1.0.0"
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    # Airtable Configuration (record store)
    airtable_api_key: str = Field(min_length=1)
    airtable_base_id: str = Field(min_length=1)
    airtable_endpoint_url: str = "https://api.airtable.com"
    airtable_table_name: str = "Productos"
    airtable_view: str = "Grid view"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def load_settings_or_exit() -> Settings:
    """Build settings from the environment, exiting with status 1 if it is missing or invalid."""
    try:
        return get_settings()
    except ValidationError as exc:
        missing, invalid = [], []
        for err in exc.errors():
            name = str(err["loc"][0]).upper() if err.get("loc") else "?"
            if err["type"] in MISSING_ERROR_TYPES:
                missing.append(name)
            else:
                invalid.append(f"{name} ({err['msg']})")
        if missing:
            logger.error(f"ERROR: Las variables de entorno {', '.join(missing)} no están definidas.")
        if invalid:
            logger.error(f"ERROR: Las variables de entorno {', '.join(invalid)} tienen valores inválidos.")
        sys.exit(1)
