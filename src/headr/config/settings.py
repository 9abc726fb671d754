"""Where: src/headr/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the CLI and services without file I/O.
Trade-offs: - Invalid values fall back to defaults with a warning instead of aborting.
"""

from __future__ import annotations

from pathlib import Path

from headr.config.config import (
    DEFAULT_LINE_SPEC,
    READ_CHUNK_SIZE_DEFAULT,
    config as app_config,
)
from headr.features.counting import CountPolicy
from headr.platform.logging import logger

# Counting --------------------------------------------------------------------

_default_lines = getattr(app_config, "default_lines", DEFAULT_LINE_SPEC)
DEFAULT_LINE_SPEC_VALUE: str = (
    str(_default_lines).strip() if str(_default_lines).strip() else DEFAULT_LINE_SPEC
)

try:
    COUNT_POLICY: CountPolicy = CountPolicy.from_user_input(str(app_config.count_policy))
except ValueError as exc:
    logger.warning("%s; falling back to '%s'", exc, CountPolicy.PERMISSIVE.value)
    COUNT_POLICY = CountPolicy.PERMISSIVE


# I/O -------------------------------------------------------------------------

_chunk_size = getattr(app_config, "chunk_size", READ_CHUNK_SIZE_DEFAULT)
READ_CHUNK_SIZE: int = (
    _chunk_size
    if isinstance(_chunk_size, int) and not isinstance(_chunk_size, bool) and _chunk_size > 0
    else READ_CHUNK_SIZE_DEFAULT
)

LOG_FILE: Path | None = app_config.log_file


__all__ = [
    "COUNT_POLICY",
    "DEFAULT_LINE_SPEC_VALUE",
    "LOG_FILE",
    "READ_CHUNK_SIZE",
]
