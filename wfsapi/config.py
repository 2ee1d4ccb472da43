"""Service configuration read from the environment on every call."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from wfsapi.catalog import DEFAULT_CATALOG_PATH

TITLE_ENV = "WFSAPI_TITLE"
DESCRIPTION_ENV = "WFSAPI_DESCRIPTION"
MAX_FEATURES_ENV = "WFSAPI_MAX_FEATURES"
CATALOG_ENV = "WFSAPI_CATALOG"
CORS_ORIGINS_ENV = "WFSAPI_CORS_ORIGINS"

DEFAULT_TITLE = "Web Feature Service API"
DEFAULT_DESCRIPTION = "OGC API Features endpoint listing the collections of this server."
DEFAULT_MAX_FEATURES = 1000000


class ServiceConfig(BaseModel):
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    max_page_size: int = Field(default=DEFAULT_MAX_FEATURES, ge=1)


def _title() -> str:
    return os.getenv(TITLE_ENV, "").strip() or DEFAULT_TITLE


def _description() -> str:
    return os.getenv(DESCRIPTION_ENV, "").strip() or DEFAULT_DESCRIPTION


def _max_page_size() -> int:
    raw = os.getenv(MAX_FEATURES_ENV, str(DEFAULT_MAX_FEATURES)).strip()
    try:
        value = int(raw)
    except ValueError:
        value = DEFAULT_MAX_FEATURES
    return value if value > 0 else DEFAULT_MAX_FEATURES


def catalog_path() -> Path:
    raw = os.getenv(CATALOG_ENV, "").strip()
    return Path(raw) if raw else DEFAULT_CATALOG_PATH


def cors_origins() -> list[str]:
    raw = os.getenv(CORS_ORIGINS_ENV, "*").strip()
    if not raw:
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_service_config() -> ServiceConfig:
    return ServiceConfig(title=_title(), description=_description(), max_page_size=_max_page_size())
