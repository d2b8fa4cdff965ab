"""Console logging formatter with per-level colors."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the levelname in ANSI color codes.

    Colors are skipped when ``NO_COLOR`` is set or when the target stream is
    not a TTY, so log files stay plain.
    """

    LEVEL_COLORS: dict[str, str] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)  # type: ignore[arg-type]
        self.stream = stream

    def use_color(self) -> bool:
        if "NO_COLOR" in os.environ:
            return False
        stream = self.stream or sys.stdout
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelname)
        if color is None or not self.use_color():
            return super().format(record)

        # Copy so other handlers still see the plain levelname.
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)
