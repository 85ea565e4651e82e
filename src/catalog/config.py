"""Service configuration loaded from environment variables."""
from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog.search.errors import InvalidConfiguration
from catalog.search.options import (
    FIELD_DESCRIPTION,
    FIELD_TAGS,
    FIELD_TITLE,
    SearchOptions,
)


class Settings(BaseSettings):
    """Service configuration loaded from environment variables.

    Attributes:
        host: Bind address for the API server.
        port: Port number for the API server.
        debug: Enable debug logging and API documentation.
        cors_origins_raw: Raw comma-separated CORS origins string.
        shutdown_timeout: Seconds to wait for graceful shutdown.
        key: API key required for catalog writes (empty disables auth).
        auth_protect_reads: Require the API key for reads as well.
        log_json: Render logs as JSON lines instead of console output.
        search_threshold: Fraction of query characters allowed to differ.
        title_weight: Relevance weight of the title field.
        tags_weight: Relevance weight of the tags field.
        description_weight: Relevance weight of the description field.
        min_match_length: Minimum query length for suggestions.
        default_page_size: Page size used when a request sets none.
        max_page_size: Largest page size a request may ask for.
        suggestion_limit: Maximum number of suggestions returned.
        seed_sample_data: Populate the store with sample records on startup.
    """

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_origins_raw: str = "http://localhost:5173"
    shutdown_timeout: float = 30.0
    key: str = ""
    auth_protect_reads: bool = False
    log_json: bool = True

    search_threshold: float = 0.36
    title_weight: float = 0.6
    tags_weight: float = 0.25
    description_weight: float = 0.15
    min_match_length: int = 2
    default_page_size: int = 10
    max_page_size: int = 100
    suggestion_limit: int = 8

    seed_sample_data: bool = True

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string.

        Returns:
            List of allowed origin URLs.
        """
        return [
            origin.strip()
            for origin in self.cors_origins_raw.split(",")
            if origin.strip()
        ]

    def search_options(self) -> SearchOptions:
        """Build validated search options from the tuning settings.

        Raises:
            InvalidConfiguration: If the tuning values are inconsistent.
        """
        return SearchOptions(
            threshold=self.search_threshold,
            weights={
                FIELD_TITLE: self.title_weight,
                FIELD_TAGS: self.tags_weight,
                FIELD_DESCRIPTION: self.description_weight,
            },
            min_match_length=self.min_match_length,
            suggestion_limit=self.suggestion_limit,
        )

    def check_page_sizes(self) -> None:
        """Ensure the request page size defaults are usable.

        Raises:
            InvalidConfiguration: If either size is not positive or the
                default exceeds the maximum.
        """
        if self.max_page_size <= 0:
            raise InvalidConfiguration(
                f"max_page_size must be positive, got {self.max_page_size}",
                "max_page_size",
            )
        if self.default_page_size <= 0:
            raise InvalidConfiguration(
                f"default_page_size must be positive, got {self.default_page_size}",
                "default_page_size",
            )
        if self.default_page_size > self.max_page_size:
            raise InvalidConfiguration(
                f"default_page_size {self.default_page_size} exceeds "
                f"max_page_size {self.max_page_size}",
                "default_page_size",
            )
