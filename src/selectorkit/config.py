from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class SelectorkitConfig:
    log_level: str = "WARNING"  # one of LOG_LEVELS
    json_indent: int | None = None  # None = compact output

    @classmethod
    def from_env(cls) -> SelectorkitConfig:
        """Build a config from SELECTORKIT_* environment variables.

        Raises ValueError for an unknown log level or a non-integer indent.
        """
        log_level = (os.environ.get("SELECTORKIT_LOG_LEVEL") or cls.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"SELECTORKIT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got {log_level!r}"
            )
        indent = os.environ.get("SELECTORKIT_JSON_INDENT", "")
        return cls(
            log_level=log_level,
            json_indent=int(indent) if indent else None,
        )
