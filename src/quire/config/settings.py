"""Configuration for quire.

Settings come from three places, highest priority first:

1. Environment variables (``QUIRE_SECTION__KEY``, e.g. ``QUIRE_STORE__ENCODING``)
2. ``.quire.toml`` in the site root
3. Defaults
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quire.config.exceptions import ConfigLoadError, ConfigValidationError
from quire.store.locator import normalize_extensions

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".quire.toml"
DEFAULT_CONTENT_ROOT = Path("posts")
DEFAULT_EXTENSIONS = [".md"]
DEFAULT_MAX_WORKERS = 8


def _deep_merge(destination: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(destination.get(key), Mapping):
            destination[key] = _deep_merge(dict(destination[key]), value)
        else:
            destination[key] = value
    return destination


class StoreSettings(BaseModel):
    """Where documents live and how they are read."""

    content_root: Path = Field(
        default=DEFAULT_CONTENT_ROOT,
        description="Directory holding one Markdown file per document",
    )
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File extensions treated as documents",
    )
    encoding: str = Field(default="utf-8", description="Text encoding of document files")
    max_workers: int = Field(
        default=DEFAULT_MAX_WORKERS,
        ge=1,
        description="Upper bound on parallel document loads",
    )

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return list(normalize_extensions(value))

    def resolved(self, site_root: Path) -> StoreSettings:
        """Return a copy whose ``content_root`` is absolute."""
        if self.content_root.is_absolute():
            return self
        return self.model_copy(update={"content_root": site_root / self.content_root})


class QuireConfig(BaseSettings):
    """Root configuration.

    Supports environment variable overrides with the pattern
    QUIRE_SECTION__KEY (e.g., QUIRE_STORE__CONTENT_ROOT).
    """

    site_root: Path = Field(default_factory=Path.cwd, description="Root directory of the site")
    store: StoreSettings = Field(default_factory=StoreSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="QUIRE_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> QuireConfig:
        """Load configuration from ``.quire.toml`` and environment variables.

        Raises:
            ConfigLoadError: If the config file cannot be read or is not TOML.
            ConfigValidationError: If a value is invalid.

        """
        root_path = (site_root if site_root is not None else Path.cwd()).expanduser().resolve()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            logger.debug("Loading config from %s", config_file)
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigLoadError(config_file, str(exc)) from exc
            except OSError as exc:
                raise ConfigLoadError(config_file, exc.strerror or str(exc)) from exc

        try:
            env_settings = cls().model_dump(exclude_unset=True)
            merged = _deep_merge(file_settings, env_settings)
            merged["site_root"] = root_path
            return cls.model_validate(merged)
        except ValidationError as exc:
            raise ConfigValidationError(exc.errors()) from exc

    def store_settings(self) -> StoreSettings:
        return self.store.resolved(self.site_root)
