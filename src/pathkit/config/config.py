"""Configuration management for pathkit."""

from __future__ import annotations

import codecs
import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pathkit.config.paths import default_config_path

logger = logging.getLogger("pathkit.config")

TEXT_ENCODING_DEFAULT = "utf-8"
CONSOLE_LOG_LEVEL_DEFAULT = "INFO"
_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Encoding used by text reads and writes
    text_encoding: str = TEXT_ENCODING_DEFAULT

    # Write through a temporary sibling file and rename it into place
    atomic_writes: bool = True

    # Log file path
    log_file: Path | None = _path_field()

    # Minimum level shown on the console
    console_log_level: str = CONSOLE_LOG_LEVEL_DEFAULT

    # Singleton instance
    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and validate values.

        Only fields flagged with ``metadata={"path": True}`` are converted.

        Raises:
            ConfigError: If a value has the wrong type or is not recognised.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)
            elif value is not None and not isinstance(value, Path):
                raise ConfigError(f"{f.name} must be a path string, got {value!r}")

        try:
            _ = codecs.lookup(self.text_encoding)
        except (LookupError, TypeError) as exc:
            raise ConfigError(f"Unknown text_encoding: {self.text_encoding!r}") from exc

        if not isinstance(self.atomic_writes, bool):
            raise ConfigError(f"atomic_writes must be a boolean, got {self.atomic_writes!r}")

        level = str(self.console_log_level).strip().upper()
        if level not in _VALID_LOG_LEVELS:
            valid = ", ".join(_VALID_LOG_LEVELS)
            raise ConfigError(f"Unsupported console_log_level '{self.console_log_level}'. Valid options: {valid}")
        self.console_log_level = level

    @classmethod
    def from_file(cls, config_file: Path) -> Config:
        """Read configuration from ``config_file`` without caching it.

        A missing file yields the defaults; nothing is written to disk.

        Args:
            config_file: TOML file to read.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid configuration file {config_file}: {exc}") from exc

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        instance = cls(**{key: value for key, value in config_dict.items() if key in known})
        logger.debug("Configuration loaded from %s", config_file)
        return instance

    @classmethod
    def load(cls, config_file: Path | None = None) -> Config:
        """Load the shared configuration, caching it after the first call.

        Args:
            config_file: Optional explicit file; defaults to the portable location.

        Returns:
            Config: Loaded configuration object.
        """
        target = config_file or default_config_path()
        if cls._instance is not None and cls._loaded_from == target:
            return cls._instance

        instance = cls.from_file(target)
        cls._instance = instance
        cls._loaded_from = target
        return instance


__all__ = ["Config", "ConfigError", "CONSOLE_LOG_LEVEL_DEFAULT", "TEXT_ENCODING_DEFAULT"]
