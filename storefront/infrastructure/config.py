"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Product data source
    catalog_url: str = Field(
        default="https://fakestoreapi.com/products/",
        description="Endpoint returning the product record list",
    )
    fetch_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Product fetch timeout in seconds",
    )
    autoload: bool = Field(
        default=True,
        description="Fetch the catalog when the application starts",
    )

    # Catalog
    stock_probability: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Chance that a loaded product is in stock",
    )
    stock_seed: int | None = Field(
        default=None,
        description="Seed for availability draws; random when unset",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "STOREFRONT_",
        "extra": "ignore",
    }


settings = Settings()
