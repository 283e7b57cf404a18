from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ObjTasksConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None means compact output
    sort_keys: bool = False

    @classmethod
    def from_env(cls) -> ObjTasksConfig:
        """Create a config from ``OBJTASKS_*`` environment variables.

        Unset variables fall back to the dataclass defaults. Raises
        ``ValueError`` naming the variable when a value cannot be used.
        """
        log_level = os.environ.get("OBJTASKS_LOG_LEVEL", cls.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"OBJTASKS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got {log_level!r}"
            )

        indent = os.environ.get("OBJTASKS_JSON_INDENT")
        try:
            json_indent = int(indent) if indent else None
        except ValueError:
            raise ValueError(
                f"OBJTASKS_JSON_INDENT must be an integer, got {indent!r}"
            ) from None

        return cls(
            log_level=log_level,
            json_indent=json_indent,
            sort_keys=os.environ.get("OBJTASKS_SORT_KEYS", "").lower()
            in ("1", "true", "yes"),
        )
