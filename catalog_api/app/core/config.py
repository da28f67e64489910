"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with demo data and open CORS when nothing is set.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    environment: str = os.getenv("APP_ENV", "development")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Address uvicorn binds to when started through ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Routes for the resource collections are mounted below ``api_prefix``.
    # The OpenAPI document and the Swagger UI live at their own paths so
    # they can be moved independently.
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")
    openapi_url: str = os.getenv("OPENAPI_URL", "/api/openapi.json")

    # Comma‑separated list of allowed origins, ``*`` for any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Load the demo users and products at startup.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
