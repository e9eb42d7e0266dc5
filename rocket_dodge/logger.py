"""Lightweight logging wrapper.

Provides simple leveled logging with an environment-based minimum level.
Records go to stderr so the name prompt on stdout is left untouched.
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_DEFAULT_LEVEL_NAME = os.environ.get("ROCKET_DODGE_LOG_LEVEL", "INFO").upper()
_MIN_LEVEL = _LEVELS.get(_DEFAULT_LEVEL_NAME, 20)


@dataclass
class Logger:
    name: str
    stream: TextIO | None = field(default_factory=lambda: sys.stderr)
    min_level: int = _MIN_LEVEL

    def _log(self, level: str, *parts):
        numeric = _LEVELS[level]
        if numeric < self.min_level:
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        line = f"[{ts}] {level:<5} {self.name}: {msg}\n"
        if self.stream is None:
            return
        try:
            self.stream.write(line)
            self.stream.flush()
        except (OSError, ValueError):
            # Detached or closed stream (pythonw, redirected and closed pipes).
            return

    def debug(self, *parts):
        self._log("DEBUG", *parts)

    def info(self, *parts):
        self._log("INFO", *parts)

    def warn(self, *parts):
        self._log("WARN", *parts)

    def error(self, *parts):
        self._log("ERROR", *parts)


def get_logger(name: str = "rocket_dodge") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "Logger"]
