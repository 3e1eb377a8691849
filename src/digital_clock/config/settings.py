"""Settings and configuration management using Pydantic."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple, Type

import yaml
from pydantic import Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

CONFIG_FILE = Path("config.yaml")

logger = logging.getLogger("digital_clock.config")


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    Settings source that loads values from ``config.yaml`` in the
    current working directory.
    """

    def _load(self) -> Dict[str, Any]:
        if not CONFIG_FILE.exists():
            return {}

        encoding = self.config.get("env_file_encoding")
        try:
            content = yaml.safe_load(CONFIG_FILE.read_text(encoding))
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {CONFIG_FILE}: {e}")
            return {}

        if not isinstance(content, dict):
            return {}
        return content

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def prepare_field_value(
        self, field_name: str, field: FieldInfo, value: Any, value_is_complex: bool
    ) -> Any:
        return value

    def __call__(self) -> Dict[str, Any]:
        fields = self.settings_cls.model_fields
        return {key: value for key, value in self._load().items() if key in fields}


class Settings(BaseSettings):
    """Digital Clock configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # Display
    zero_pad: bool = Field(
        default=True,
        description="Render fields as two digits (09:05:03 instead of 9:5:3)",
    )
    banner: str = Field(
        default="DIGITAL CLOCK",
        description="Line printed once before the clock starts",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Expand environment variables and user paths."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            v = os.path.expandvars(os.path.expanduser(v))
        return Path(v)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
