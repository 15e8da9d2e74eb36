"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (DICTIONARY__SERVER__PORT=9090)
  2. dictionary.yaml        (searched in cwd, then the platform config dir)
  3. Hardcoded defaults

The config file is optional; every field has a default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_APP_NAME = "dictionary-service"
_DEFAULT_DATA_DIR = platformdirs.user_data_dir(_APP_NAME)
_DEFAULT_DICT_PATH = str(Path(_DEFAULT_DATA_DIR) / "dictionary.db")


def _find_config_file() -> str | None:
    """Return the path of the first dictionary.yaml found, or None."""
    candidates = [
        Path("dictionary.yaml"),
        Path(platformdirs.user_config_dir(_APP_NAME)) / "dictionary.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class ServerSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    host: str = "0.0.0.0"
    port: int = 8080
    # Frontend bundle; skipped when the directory does not exist
    static_dir: str | None = "static"
    cors_origins: list[str] = ["*"]


class DictionarySettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # SQLite snapshot, or a source .json file loaded directly
    path: str = _DEFAULT_DICT_PATH


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: DICTIONARY__SERVER__PORT=9090
        env_prefix="DICTIONARY__",
        env_nested_delimiter="__",
        yaml_file_encoding="utf-8",
    )

    data_dir: str = _DEFAULT_DATA_DIR
    server: ServerSettings = ServerSettings()
    dictionary: DictionarySettings = DictionarySettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls, yaml_file=_find_config_file()),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
