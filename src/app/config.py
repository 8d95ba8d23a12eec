"""Application configuration with structured settings groups."""
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class PagingSettings(BaseModel):
    """
    Client listing pagination settings.

    default_page_size: Page size used when the caller does not give one.
    max_page_size: Largest page size the API accepts.
    """

    default_page_size: int = 10
    max_page_size: int = 100


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: PAGING__DEFAULT_PAGE_SIZE=25
    """

    # Application metadata
    app_name: str = "Banking Control Panel API"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/banking_control_panel"
    database_echo: bool = False

    paging: PagingSettings = PagingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

