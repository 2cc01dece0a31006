import logging
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"
RESOURCES_DIR = Path(__file__).parent / "resources"


class DefaultSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True,
        env_nested_delimiter="__")


class OpenSearchSettings(DefaultSettings):
    """Opensearch settings"""
    model_config = SettingsConfigDict(
        env_file=[".env", str(ENV_FILE_PATH)],
        env_prefix="OPENSEARCH__",
        extra="ignore",
        frozen=True,
        case_sensitive=False,
    )

    host: str = "http://opensearch:9200"  # Docker service name for container-to-container
    timeout: int = 30  # transport default, per-call timeouts override it


class SuggestSettings(DefaultSettings):
    """Suggest analyzer settings."""
    model_config = SettingsConfigDict(
        env_file=[".env", str(ENV_FILE_PATH)],
        env_prefix="SUGGEST__",
        extra="ignore",
        frozen=True,
        case_sensitive=False,
        populate_by_name=True,
    )

    settings_index_name: str = "fess_suggest"
    indices_timeout: float = 60.0  # seconds, applied to every admin call

    # Substituted for ${fess.dictionary.path} in the analyzer settings template
    dictionary_path: str = Field(
        default="",
        validation_alias=AliasChoices("FESS_DICTIONARY_PATH", "SUGGEST__DICTIONARY_PATH"),
    )

    analyzer_check_workers: int = 1  # >1 probes analyzers from a thread pool

    resources_dir: Path = RESOURCES_DIR
    settings_resource: str = "suggest_indices/suggest_analyzer.json"
    mapping_resource: str = "suggest_indices/analyzer/mapping-default.json"

    @field_validator("analyzer_check_workers")
    @classmethod
    def validate_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("analyzer_check_workers must be at least 1")
        return value


class Settings(DefaultSettings):
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    service_name: str = "suggest-analyzer-api"
    log_level: str = "INFO"

    opensearch: OpenSearchSettings = Field(default_factory=OpenSearchSettings)
    suggest: SuggestSettings = Field(default_factory=SuggestSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        if isinstance(value, str):
            value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value


def get_settings() -> Settings:
    return Settings()
