"""Runtime settings for the console driver."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_LOG_LEVEL_ENV = "CHESSAI_LOG_LEVEL"


@dataclass
class DriverSettings:
    """Knobs for :func:`chessai.app.main`."""

    log_level: str = "WARNING"
    wait_for_input: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DriverSettings:
        env = os.environ if environ is None else environ
        settings = cls()
        level = env.get(_LOG_LEVEL_ENV)
        if level:
            settings.log_level = level.upper()
        return settings

    @property
    def numeric_log_level(self) -> int:
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        return level
