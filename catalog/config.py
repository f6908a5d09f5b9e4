"""
Application settings.

Values are read from environment variables once, when this module is
imported.  Tests and embedding code can build their own ``Settings``
instance and hand it to ``create_app`` instead.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Shared secret required on mutating routes.  The header name is
    # deployment configuration as well.
    api_key: str = os.getenv("API_KEY", "mysecretapikey")
    api_key_header: str = os.getenv("API_KEY_HEADER", "x-api-key")


settings = Settings()
