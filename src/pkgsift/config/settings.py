"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (PKGSIFT_ prefix) and ``.env``
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class HttpSettings(BaseModel):
    """Outbound HTTP configuration shared by all adapters."""

    user_agent: str = Field(
        default="my_crawler (help@my_crawler.com)",
        description="User-Agent sent to every registry",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")


class JsDelivrSettings(BaseModel):
    """jsDelivr package index configuration.

    jsDelivr's package search is served by Algolia. The application id and
    search-only API key are not shipped with PkgSift; set them via
    ``PKGSIFT_JSDELIVR__APP_ID`` and ``PKGSIFT_JSDELIVR__API_KEY`` or the YAML
    config file.
    """

    app_id: str = Field(default="", description="Algolia application id")
    api_key: str = Field(default="", description="Algolia search-only API key")
    index: str = Field(default="npm-search", description="Algolia index name")
    agent: str = Field(
        default="Algolia for JavaScript (3.35.1); Browser (lite)",
        description="Value of the X-Algolia-Agent header",
    )
    attributes: list[str] = Field(
        default_factory=lambda: ["name", "version", "description", "homepage"],
        description="Attributes returned for each hit",
    )


class AdapterConfig(BaseModel):
    """Configuration for a single registry adapter."""

    enabled: bool = Field(default=True, description="Whether this adapter is active")
    base_url: str | None = Field(default=None, description="Override the registry base URL")


class SearchSettings(BaseModel):
    """Search behavior configuration."""

    adapters: dict[str, AdapterConfig] = Field(default_factory=dict, description="Per-adapter configuration")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="warning", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="console", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the PKGSIFT_ prefix.
    Nested settings use double underscores: PKGSIFT_HTTP__TIMEOUT=10

    Example:
        PKGSIFT_HTTP__USER_AGENT="my-bot (ops@example.com)"
        PKGSIFT_JSDELIVR__APP_ID=...
        PKGSIFT_JSDELIVR__API_KEY=...
        PKGSIFT_OBSERVABILITY__LOG_LEVEL=debug
    """

    model_config = {
        "env_prefix": "PKGSIFT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    app_name: str = Field(default="PkgSift", description="Application name")

    http: HttpSettings = Field(default_factory=HttpSettings)
    jsdelivr: JsDelivrSettings = Field(default_factory=JsDelivrSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    def adapter_config(self, name: str) -> AdapterConfig:
        """Return the configuration for *name*, falling back to defaults."""
        return self.search.adapters.get(name) or AdapterConfig()

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Keys present in the YAML file are passed as init arguments and win
        over environment variables; everything else still comes from the
        environment or defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}: {config_path}")

        return cls(**data)
