"""Lightweight leveled logger.

Mirrors the plain ``[time] LEVEL name: message`` lines the scene host prints,
with the minimum level taken from ``DIORAMA_LOG_LEVEL``. Particle systems log
only on construction and on exceptional ticks, never per particle.
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import TextIO

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_DEFAULT_LEVEL_NAME = os.environ.get("DIORAMA_LOG_LEVEL", "INFO").upper()
_MIN_LEVEL = _LEVELS.get(_DEFAULT_LEVEL_NAME, 20)


@dataclass
class Logger:
    name: str
    stream: TextIO | None = sys.stdout
    min_level: int = _MIN_LEVEL

    def _log(self, level: str, *parts):
        if _LEVELS[level] < self.min_level or self.stream is None:
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        line = f"[{ts}] {level:<5} {self.name}: {msg}\n"
        try:
            self.stream.write(line)
            self.stream.flush()
        except (OSError, ValueError, AttributeError):
            # Detached or closed streams (pythonw, embedded browsers) must not
            # take the render loop down with them.
            return

    def debug(self, *parts):
        self._log("DEBUG", *parts)

    def info(self, *parts):
        self._log("INFO", *parts)

    def warn(self, *parts):
        self._log("WARN", *parts)

    def error(self, *parts):
        self._log("ERROR", *parts)


def get_logger(name: str = "diorama") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "Logger"]
