"""Where: src/pathkit/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config validation already rejected unusable values.
Trade-offs: - Values are read once at import; tests patch the module constants.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pathkit.config.config import Config

_app_config = Config.load()

# Encoding used by PathService.read_text / write_text.
TEXT_ENCODING: str = _app_config.text_encoding

# Whether the local provider writes through a temporary file.
ATOMIC_WRITES: bool = _app_config.atomic_writes

# Optional rotating log file; None keeps logging console-only.
LOG_FILE: Path | None = _app_config.log_file

CONSOLE_LOG_LEVEL: int = logging.getLevelNamesMapping()[_app_config.console_log_level]


__all__ = ["ATOMIC_WRITES", "CONSOLE_LOG_LEVEL", "LOG_FILE", "TEXT_ENCODING"]
