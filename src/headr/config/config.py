"""Configuration management for headr."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from headr.config.paths import default_config_path
from headr.features.extraction.usecases.prefix_extractor import DEFAULT_CHUNK_SIZE
from headr.platform.logging import logger

DEFAULT_LINE_SPEC: Final[str] = "10"
COUNT_POLICY_DEFAULT: Final[str] = "permissive"
READ_CHUNK_SIZE_DEFAULT: Final[int] = DEFAULT_CHUNK_SIZE


def _path_field(default: Path | None = None) -> Any:
    """Create a dataclass field flagged for ``str`` to ``Path`` conversion."""

    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Line literal used when ``-n`` is omitted
    default_lines: str = DEFAULT_LINE_SPEC

    # "permissive" accepts zero and negative counts, "strict" rejects them
    count_policy: str = COUNT_POLICY_DEFAULT

    # Read block size in bytes
    chunk_size: int = READ_CHUNK_SIZE_DEFAULT

    # Optional rotating log file
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths flagged by ``_path_field`` into ``Path`` objects."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults when it is absent.

        Args:
            config_file: Explicit file to read; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        if config_file is None and cls._instance is not None:
            return cls._instance

        source = config_file or default_config_path()

        if not source.exists():
            logger.debug("No configuration file at %s; using defaults", source)
            instance = cls()
        else:
            try:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)
                del config_dict[key]

            logger.debug("Configuration loaded from %s", source)
            instance = cls(**config_dict)

        if config_file is None:
            cls._instance = instance
        return instance


# Global configuration instance
config = Config.load()
