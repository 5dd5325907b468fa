"""
Configuration for the product catalog service.

``Settings`` reads its defaults from environment variables.  Before the
dataclass is evaluated, an optional env file (``CATALOG_ENV_FILE``,
``.env`` by default) is loaded with ``python-dotenv``; variables that are
already present in the environment win over the file.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(os.getenv("CATALOG_ENV_FILE", ".env"), override=False)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # Secret expected in the ``token`` header of every write request.  An
    # empty value rejects all writes.
    token: str = os.getenv("TOKEN", "")

    # JSON file holding the initial product list.
    products_file: str = os.getenv("PRODUCTS_FILE", "products.json")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8080"))


settings = Settings()
